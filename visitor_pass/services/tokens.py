import base64
import hashlib
import secrets
from datetime import datetime

PASS_TOKEN_LENGTH = 22


def generate_pass_token(request_id: str, now: datetime) -> str:
    """
    Непрозрачный токен для ссылки на пропуск.
    Смешивает request_id, время и случайные байты, чтобы ссылку нельзя было угадать
    """
    digest = hashlib.sha256()
    digest.update(request_id.encode("utf-8"))
    digest.update(now.isoformat().encode("utf-8"))
    digest.update(secrets.token_bytes(16))
    token = base64.urlsafe_b64encode(digest.digest()).decode("ascii").rstrip("=")
    return token[:PASS_TOKEN_LENGTH]
