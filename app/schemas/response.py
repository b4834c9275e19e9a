from typing import Any


def envelope(message: str, data: Any = None, **extra: Any) -> dict:
    """Envelope padrão de sucesso: {success, message, data?, ...}."""
    body: dict = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return body
