"""Tests for data URL scanning in plain text and HTML."""

from b64img.core.models import ScanMode
from b64img.core.scanner import PayloadScanner

from samples import PNG_1X1_DATA_URL, data_url


class TestPlainScan:
    def test_no_data_urls(self):
        assert PayloadScanner.scan("just some text, data:text/plain;base64,aGVsbG8=") == []

    def test_finds_all_in_order(self):
        gif = data_url("image/gif")
        text = f"first {PNG_1X1_DATA_URL} then {gif} end"
        assert PayloadScanner.scan_text(text) == [PNG_1X1_DATA_URL, gif]

    def test_duplicates_removed(self):
        text = f"{PNG_1X1_DATA_URL}\n{PNG_1X1_DATA_URL}\n"
        assert PayloadScanner.scan(text) == [PNG_1X1_DATA_URL]

    def test_match_stops_at_disallowed_character(self):
        text = "x data:image/png;base64,AAAA&quot;BBBB y"
        assert PayloadScanner.scan(text) == ["data:image/png;base64,AAAA"]

    def test_mime_casing_is_not_normalized(self):
        text = "data:image/PNG;base64,AAAA data:image/png;base64,AAAA"
        assert PayloadScanner.scan(text) == [
            "data:image/PNG;base64,AAAA",
            "data:image/png;base64,AAAA",
        ]


class TestHtmlScan:
    """HTML mode with attribute and CSS contexts"""

    def setup_method(self):
        self.png = data_url("image/png")
        self.jpeg = data_url("image/jpeg")
        self.gif = data_url("image/gif")
        self.webp = data_url("image/webp")

    def test_same_image_in_src_and_background(self):
        html = (
            "<!DOCTYPE html><html><body>"
            f'<img src="{self.png}" alt="logo">'
            f"<div style=\"background-image: url('{self.png}')\"></div>"
            "</body></html>"
        )
        assert PayloadScanner.scan(html, ScanMode.HTML) == [self.png]

    def test_four_distinct_images_in_order(self):
        html = (
            "<!doctype html>\n<html>\n<head><style>\n"
            f".icon::before {{ content: url({self.gif}); }}\n"
            "</style></head>\n<body>\n"
            f'<img src="{self.png}">\n'
            f"<div style=\"background-image: url('{self.jpeg}')\"></div>\n"
            f"<img src='{self.webp}'>\n"
            f'<img src="{self.png}">\n'
            "</body>\n</html>"
        )
        assert PayloadScanner.scan_html(html) == [self.gif, self.png, self.jpeg, self.webp]

    def test_html_without_images(self):
        html = "<html><body><img src=\"https://example.com/a.png\"></body></html>"
        assert PayloadScanner.scan_html(html) == []

    def test_each_context_yields_inner_data_url(self):
        fragments = [
            f'SRC = "{self.png}"',
            f'background-image:url("{self.png}")',
            f"style='color: red; background: url({self.png}) no-repeat'",
            f"content : url('{self.png}')",
        ]
        for (name, pattern), fragment in zip(PayloadScanner.HTML_CONTEXTS, fragments):
            match = pattern.search(fragment)
            assert match is not None, name
            assert PayloadScanner.extract_data_url(match.group(0)) == self.png

    def test_extract_data_url_without_match(self):
        assert PayloadScanner.extract_data_url('src="image.png"') is None


class TestHtmlDetection:
    def test_doctype(self):
        assert PayloadScanner.looks_like_html("  <!DOCTYPE html>\n<p>hi</p>")

    def test_html_tag(self):
        assert PayloadScanner.looks_like_html("<div></div><html lang='en'>")

    def test_content_type(self):
        assert PayloadScanner.looks_like_html("plain", content_type="text/html; charset=utf-8")

    def test_plain_text(self):
        assert not PayloadScanner.looks_like_html(PNG_1X1_DATA_URL)
        assert not PayloadScanner.looks_like_html("body", content_type="text/plain")
