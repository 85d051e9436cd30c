import aiohttp
from config.config import API_URL


class QuizApiError(Exception):
    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class QuizAPI:
    def __init__(self, base_url: str = None, session=None):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.headers = {
            "Content-Type": "application/json"
        }
        self.session = session

    async def setup(self):
        if not self.session:
            self.session = aiohttp.ClientSession()

    async def _make_request(self, method: str, path: str, payload=None):
        url = f"{self.base_url}{path}"
        async with self.session.request(method, url, json=payload, headers=self.headers) as response:
            data = await response.json(content_type=None)
            if response.status >= 400:
                message = data.get("error") if isinstance(data, dict) else None
                raise QuizApiError(response.status, message or f"Request failed with status {response.status}")
            return data

    async def get_all_quizzes(self):
        return await self._make_request("GET", "/quizzes/")

    async def get_all_quizzes_admin(self):
        return await self._make_request("GET", "/quizzes/admin/all")

    async def get_quiz_by_slug(self, slug: str):
        return await self._make_request("GET", f"/quizzes/slug/{slug}")

    async def get_quiz_by_id(self, quiz_id: str):
        return await self._make_request("GET", f"/quizzes/admin/{quiz_id}")

    async def create_quiz(self, quiz_data: dict):
        return await self._make_request("POST", "/quizzes/", quiz_data)

    async def update_quiz(self, quiz_id: str, quiz_data: dict):
        return await self._make_request("PUT", f"/quizzes/{quiz_id}", quiz_data)

    async def delete_quiz(self, quiz_id: str):
        return await self._make_request("DELETE", f"/quizzes/{quiz_id}")

    async def submit_response(self, quiz_id: str, answers: list, contact_info: dict):
        payload = {"quizId": quiz_id, "answers": answers, "contactInfo": contact_info}
        return await self._make_request("POST", "/responses/", payload)

    async def get_all_responses(self):
        return await self._make_request("GET", "/responses/")

    async def get_quiz_responses(self, quiz_id: str):
        return await self._make_request("GET", f"/responses/quiz/{quiz_id}")

    async def get_response_stats(self, quiz_id: str):
        return await self._make_request("GET", f"/responses/stats/{quiz_id}")

    async def get_response_by_id(self, response_id: str):
        return await self._make_request("GET", f"/responses/{response_id}")

    async def delete_response(self, response_id: str):
        return await self._make_request("DELETE", f"/responses/{response_id}")

    async def send_test_email(self, email: str, quiz_title: str, response_data: dict = None):
        payload = {"email": email, "quizTitle": quiz_title, "responseData": response_data}
        return await self._make_request("POST", "/email/test", payload)

    async def close(self):
        if self.session:
            await self.session.close()
            self.session = None
