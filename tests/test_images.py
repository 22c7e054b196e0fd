import base64
import io

from PIL import Image

from quiz_session.images import clean_base64, decode_question_image


def _png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), color=(0, 48, 135)).save(buf, format="PNG")
    return buf.getvalue()


def _jpeg_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), color=(200, 10, 10)).save(buf, format="JPEG")
    return buf.getvalue()


def test_clean_base64_strips_whitespace_and_known_prefixes() -> None:
    assert clean_base64(" data:image/png;base64,QU\nJD\r\n\tRA== ") == "QUJDRA=="
    assert clean_base64("data:image/jpeg;base64,QUJD") == "QUJD"


def test_decode_png_with_data_uri_and_line_breaks() -> None:
    raw = _png_bytes()
    encoded = base64.b64encode(raw).decode()
    wrapped = "\n".join(encoded[i:i + 20] for i in range(0, len(encoded), 20))

    assert decode_question_image(f"data:image/png;base64,{wrapped}") == raw


def test_decode_plain_jpeg() -> None:
    raw = _jpeg_bytes()

    assert decode_question_image(base64.b64encode(raw).decode()) == raw


def test_missing_image_returns_none() -> None:
    assert decode_question_image(None) is None
    assert decode_question_image("") is None


def test_invalid_base64_returns_none() -> None:
    assert decode_question_image("not*base64!") is None


def test_non_image_bytes_return_none() -> None:
    encoded = base64.b64encode(b"just some text, not a picture").decode()

    assert decode_question_image(encoded) is None


def test_unknown_data_uri_prefix_is_not_stripped() -> None:
    encoded = base64.b64encode(_png_bytes()).decode()

    assert decode_question_image(f"data:image/gif;base64,{encoded}") is None
