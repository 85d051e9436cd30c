import random
import re
import string

ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_question_id():
    return ''.join(random.choices(ID_ALPHABET, k=9))


def slugify(title: str) -> str:
    slug = re.sub(r'[^a-z0-9]+', '-', title.lower()).strip('-')
    return slug or generate_question_id()

