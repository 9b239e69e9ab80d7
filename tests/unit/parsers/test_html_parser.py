from unittest.mock import MagicMock

import pytest

from spec_fidelity.parsers import HtmlParser, ParseError

PAGE = """
<html><body>
<h1>Checkout</h1>
<p>The page lists <b>products</b> in the cart.</p>
<h2>Payment</h2>
<ul><li>Card</li><li>Transfer</li></ul>
<h1>Delivery</h1>
<p>Orders ship within two days.</p>
</body></html>
"""


class TestHtmlParser:
    def test_builds_section_tree(self) -> None:
        document = HtmlParser().parse(PAGE, "checkout.html")

        assert document.title == "Checkout"
        assert [s.heading for s in document.sections] == ["Checkout", "Delivery"]
        checkout = document.sections[0]
        assert checkout.content == "The page lists products in the cart."
        assert checkout.subsections[0].heading == "Payment"
        assert checkout.subsections[0].content == "Card Transfer"

    def test_metadata(self) -> None:
        document = HtmlParser().parse(PAGE, "checkout.html")

        assert document.metadata == {"source_type": "html", "filename": "checkout.html"}

    def test_raw_text(self) -> None:
        document = HtmlParser().parse(PAGE, "checkout.html")

        assert document.raw_text.startswith("Checkout\nThe page lists")
        assert "Orders ship within two days." in document.raw_text

    def test_bytes_source(self) -> None:
        document = HtmlParser().parse("<h1>Účet</h1><p>Text</p>".encode("utf-8"))

        assert document.title == "Účet"

    def test_fragment_without_headings(self) -> None:
        document = HtmlParser().parse("<p>Only text.</p>")

        assert document.title == "Introduction"
        assert document.sections[0].content == "Only text."

    def test_empty_document(self) -> None:
        document = HtmlParser().parse("")

        assert document.title == "Untitled Document"
        assert document.sections == ()
        assert document.raw_text == ""

    def test_undecodable_bytes_raise_parse_error(self) -> None:
        metrics_hook = MagicMock()

        with pytest.raises(ParseError, match="Failed to parse document 'bad.html'"):
            HtmlParser(metrics_hook=metrics_hook).parse(b"\xff\xfe\xfa", "bad.html")

        metrics_hook.increment.assert_called_once_with(
            "parsing_errors_total", labels={"source_type": "html"}
        )

    @pytest.mark.asyncio
    async def test_aparse(self) -> None:
        document = await HtmlParser().aparse(PAGE, "checkout.html")

        assert document.title == "Checkout"
