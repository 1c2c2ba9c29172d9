"""Unit tests for file type validation and size formatting."""

import pytest

from content_analysis.errors import FileTooLarge, FileTypeInvalid
from content_analysis.files import (
    detect_mime,
    format_file_size,
    is_supported_mime,
    validate_mime,
    validate_size,
)

from conftest import make_pdf, make_png


class TestValidateMime:
    @pytest.mark.parametrize("mime", ["application/pdf", "image/png", "image/jpeg", "image/gif", "image/webp"])
    def test_pdf_and_any_image_accepted(self, mime):
        assert is_supported_mime(mime)
        assert validate_mime(mime) == mime

    def test_parameters_and_case_normalized(self):
        assert validate_mime("Image/PNG; charset=binary") == "image/png"

    @pytest.mark.parametrize("mime", [None, "", "text/plain", "application/msword", "video/mp4", "imagex/png"])
    def test_everything_else_rejected(self, mime):
        with pytest.raises(FileTypeInvalid, match="PDF or image"):
            validate_mime(mime)


class TestDetectMime:
    def test_pdf_magic_bytes(self):
        assert detect_mime(make_pdf(["hi"])) == "application/pdf"

    def test_png_magic_bytes(self):
        assert detect_mime(make_png()) == "image/png"

    def test_falls_back_to_extension(self):
        assert detect_mime(b"\x00\x01garbage", filename="scan.jpg") == "image/jpeg"

    def test_unknown(self):
        assert detect_mime(b"plain text") is None


class TestValidateSize:
    def test_within_limit(self):
        validate_size(100, 100)

    def test_over_limit(self):
        with pytest.raises(FileTooLarge, match="exceeds maximum"):
            validate_size(101, 100)

    def test_zero_limit_disables_check(self):
        validate_size(10 ** 9, 0)


class TestFormatFileSize:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 Bytes"),
            (512, "512 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5 MB"),
            (int(2.25 * 1024 ** 3), "2.25 GB"),
        ],
    )
    def test_sizes(self, size, expected):
        assert format_file_size(size) == expected
