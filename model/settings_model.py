from typing import List, Literal
from model.base_model import CamelModel

ContactField = Literal['name', 'email', 'phone', 'company']


class SettingsModel(CamelModel):
    show_progress_bar: bool = True
    allow_anonymous: bool = True
    send_confirmation_email: bool = True
    require_contact_info: bool = False
    contact_fields: List[ContactField] = []
