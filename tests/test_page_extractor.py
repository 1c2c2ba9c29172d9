"""Unit tests for PageTextExtractor's native-first / OCR-fallback policy."""

from content_analysis.extractors.page_extractor import OCR_RENDER_SCALE, PageTextExtractor
from content_analysis.models.entities import ExtractionSource, Page

from conftest import LONG_TEXT, FakeOCREngine, FakePageHandle, run


def _extract(handle, engine):
    return run(PageTextExtractor(engine).extract_page(Page(index=0, handle=handle)))


class TestNativeText:
    def test_long_native_text_skips_ocr(self):
        engine = FakeOCREngine(["should not be used"])
        unit = _extract(FakePageHandle(LONG_TEXT), engine)
        assert unit.text == LONG_TEXT
        assert unit.source is ExtractionSource.NATIVE
        assert not unit.failed
        assert engine.acquired == 0

    def test_exactly_fifty_characters_is_enough(self):
        engine = FakeOCREngine()
        text = "  " + "x" * 50 + "\n"
        unit = _extract(FakePageHandle(text), engine)
        assert unit.source is ExtractionSource.NATIVE
        assert engine.acquired == 0

    def test_forty_nine_characters_falls_back(self):
        engine = FakeOCREngine(["ocr text"])
        unit = _extract(FakePageHandle("x" * 49), engine)
        assert unit.text == "ocr text"
        assert unit.source is ExtractionSource.OCR


class TestOCRFallback:
    def test_page_rendered_at_two_x(self):
        handle = FakePageHandle("")
        engine = FakeOCREngine(["scanned words"])
        _extract(handle, engine)
        assert handle.render_scales == [OCR_RENDER_SCALE] == [2.0]
        assert engine.rasters[0].width == 200

    def test_empty_ocr_keeps_short_native_text(self):
        engine = FakeOCREngine([""])
        unit = _extract(FakePageHandle("Page 3"), engine)
        assert unit.text == "Page 3"
        assert unit.source is ExtractionSource.NATIVE
        assert not unit.failed

    def test_blank_page_is_not_a_failure(self):
        unit = _extract(FakePageHandle(""), FakeOCREngine([""]))
        assert unit.text == ""
        assert not unit.failed

    def test_ocr_failure_keeps_short_native_text(self, ocr_failure):
        engine = FakeOCREngine([ocr_failure])
        unit = _extract(FakePageHandle("Short header"), engine)
        assert unit.text == "Short header"
        assert not unit.failed
        assert engine.released == 1

    def test_ocr_failure_with_no_native_text_fails_page(self, ocr_failure):
        unit = _extract(FakePageHandle("   "), FakeOCREngine([ocr_failure]))
        assert unit.failed
        assert "engine crashed" in unit.error

    def test_unexpected_ocr_error_is_wrapped_and_absorbed(self):
        engine = FakeOCREngine([ValueError("bad pixels")])
        unit = _extract(FakePageHandle("tiny"), engine)
        assert unit.text == "tiny"
        assert not unit.failed


class TestImagePages:
    def test_image_page_never_reads_text_layer(self):
        handle = FakePageHandle(LONG_TEXT, has_text_layer=False)
        engine = FakeOCREngine(["from the image"])
        unit = _extract(handle, engine)
        assert handle.text_calls == 0
        assert unit.text == "from the image"
        assert unit.source is ExtractionSource.OCR

    def test_image_with_no_recognized_text(self):
        unit = _extract(FakePageHandle(has_text_layer=False), FakeOCREngine([""]))
        assert unit.text == ""
        assert unit.source is ExtractionSource.OCR
        assert not unit.failed


class TestErrorsNeverPropagate:
    def test_native_extraction_error_becomes_failed_unit(self):
        engine = FakeOCREngine()
        unit = _extract(FakePageHandle(RuntimeError("broken xref")), engine)
        assert unit.failed
        assert unit.text == ""
        assert "broken xref" in unit.error
        assert engine.acquired == 0

    def test_render_error_becomes_failed_unit(self):
        class BrokenRender(FakePageHandle):
            def render(self, scale):
                raise MemoryError("pixmap too large")

        unit = _extract(BrokenRender(""), FakeOCREngine())
        assert unit.failed
        assert "pixmap too large" in unit.error

    def test_page_index_preserved(self):
        engine = FakeOCREngine()
        unit = run(PageTextExtractor(engine).extract_page(Page(index=4, handle=FakePageHandle(LONG_TEXT))))
        assert unit.page_index == 4
