import base64
import io

import pytest
from PIL import Image

from visitor_pass.errors import RenderFailure
from visitor_pass.services.qr import QrOptions, render_qr_data_url, render_qr_png


def test_data_url_contains_png():
    data_url = render_qr_data_url("TEST-001", QrOptions())
    prefix = "data:image/png;base64,"

    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(b"\x89PNG")


def test_image_fits_requested_width():
    png = render_qr_png("TEST-001", QrOptions(width=350))
    image = Image.open(io.BytesIO(png))

    assert image.width == image.height
    assert 200 <= image.width <= 350


def test_empty_payload_fails():
    with pytest.raises(RenderFailure):
        render_qr_png("", QrOptions())


def test_unknown_error_correction_fails():
    with pytest.raises(RenderFailure):
        render_qr_png("TEST-001", QrOptions(error_correction="X"))


def test_bad_colour_fails():
    with pytest.raises(RenderFailure):
        render_qr_png("TEST-001", QrOptions(dark_color="not-a-colour"))
