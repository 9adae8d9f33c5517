import base64
import io
import logging
from dataclasses import dataclass

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from visitor_pass.config import settings
from visitor_pass.errors import RenderFailure

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


@dataclass(frozen=True)
class QrOptions:
    width: int = 350  # px, итоговая ширина не превышает это значение
    margin: int = 2  # в модулях
    dark_color: str = "#000000"
    light_color: str = "#FFFFFF"
    error_correction: str = "M"

    @classmethod
    def from_settings(cls, config=settings) -> "QrOptions":
        return cls(
            width=config.QR_WIDTH,
            margin=config.QR_MARGIN,
            dark_color=config.QR_DARK_COLOR,
            light_color=config.QR_LIGHT_COLOR,
            error_correction=config.QR_ERROR_CORRECTION,
        )


def render_qr_png(payload: str, options: QrOptions) -> bytes:
    """Генерация PNG с QR-кодом. Любая ошибка превращается в RenderFailure"""
    if not payload:
        raise RenderFailure("QR payload is empty")

    level = ERROR_CORRECTION_LEVELS.get(options.error_correction.upper())
    if level is None:
        raise RenderFailure(f"Unknown error correction level: {options.error_correction!r}")

    try:
        qr = qrcode.QRCode(error_correction=level, border=options.margin)
        qr.add_data(payload)
        qr.make(fit=True)

        # Подбираем размер модуля под нужную ширину
        total_modules = qr.modules_count + 2 * options.margin
        qr.box_size = max(1, options.width // total_modules)

        img = qr.make_image(fill_color=options.dark_color, back_color=options.light_color)
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()
    except Exception as exc:
        raise RenderFailure(f"Failed to render QR code: {exc}") from exc


def render_qr_data_url(payload: str, options: QrOptions) -> str:
    png = render_qr_png(payload, options)
    encoded = base64.b64encode(png).decode("utf-8")
    return f"data:image/png;base64,{encoded}"
