from flask import Blueprint
from mamaalert.utils.auth import require_auth
from mamaalert.controllers.chat_controller import chat_handler, send_sms_handler

chat_bp = Blueprint("chat", __name__, url_prefix="/api")

@chat_bp.post("/chat")
@require_auth
def chat():
    """
    AI nurse chat.
    JSON: {"message": "...", "pregnancyWeek": 20}
    """
    return chat_handler()

@chat_bp.post("/sms/send")
@require_auth
def send_sms():
    return send_sms_handler()
