from pathlib import Path

import pytest
from docx import Document
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from spec_fidelity.parsers.docx_parser import DocxParser
from spec_fidelity.parsers.models import ParsedDocument
from spec_fidelity.parsers.pdf_parser import PdfParser

LONG_SKU_LINE = "SKU" + "X" * 127

CHECKOUT_PAGES = [
    [
        "CHECKOUT SPECIFICATION",
        "",
        "CART:",
        "The cart lists every product with its quantity.",
        "User can remove a product from the cart.",
        "",
        "PAYMENT:",
        "User selects card or bank transfer.",
        "The order_id and payment_id are shown after payment.",
        "",
        "DELIVERY:",
        "Orders ship within two days.",
    ]
]

ORDER_HISTORY_PAGES = [
    ["ORDER HISTORY", "", "LIST VIEW:", "Orders are sorted by date."],
    ["DETAIL VIEW:", "Each order shows its products."],
]

HEURISTIC_PAGES = [
    [
        "RETURNS POLICY",
        "",
        "REFUND RULES",
        "Refunds reach the card within five days.",
        "",
        "Eligible items:",
        "Unopened products only.",
        "",
        LONG_SKU_LINE,
        "Line after the SKU list.",
    ]
]


def _write_pdf(path: Path, pages: list[list[str]]) -> None:
    """Render one text block per page, top-left aligned."""
    c = canvas.Canvas(str(path), pagesize=A4)
    _, height = A4

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _write_pdf(dir_path / "checkout.pdf", CHECKOUT_PAGES)
    _write_pdf(dir_path / "orders.pdf", ORDER_HISTORY_PAGES)
    _write_pdf(dir_path / "returns.pdf", HEURISTIC_PAGES)

    return dir_path


def _parse_pdf(path: Path) -> ParsedDocument:
    with open(path, "rb") as f:
        return PdfParser().parse(f, path.name)


@pytest.fixture(scope="module")
def parsed_checkout(pdf_dir: Path) -> ParsedDocument:
    return _parse_pdf(pdf_dir / "checkout.pdf")


@pytest.fixture(scope="module")
def parsed_orders(pdf_dir: Path) -> ParsedDocument:
    return _parse_pdf(pdf_dir / "orders.pdf")


@pytest.fixture(scope="module")
def parsed_returns(pdf_dir: Path) -> ParsedDocument:
    return _parse_pdf(pdf_dir / "returns.pdf")


def _create_sample_docx(path: Path) -> None:
    """Creates a Word document with a title, nested headings and a table."""
    document = Document()
    document.add_paragraph("Prepared by the payments team.")
    document.add_heading("Checkout Specification", level=0)
    document.add_paragraph("The checkout page lists products in the cart.")
    document.add_heading("Payment", level=1)
    document.add_paragraph("User selects a payment method.")
    document.add_paragraph("")
    document.add_heading("Card Payment", level=2)
    document.add_paragraph("User enters card number and expiry date.")

    table = document.add_table(rows=2, cols=3)
    table.cell(0, 0).text = "Field"
    table.cell(0, 1).text = "Required"
    table.cell(0, 2).text = "Format"
    table.cell(1, 0).text = "Card number"
    merged = table.cell(1, 1).merge(table.cell(1, 2))
    merged.text = "Yes"

    document.add_heading("Delivery", level=1)
    document.add_paragraph("Orders ship within two days.")
    document.save(str(path))


@pytest.fixture(scope="module")
def docx_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path: Path = tmp_path_factory.mktemp("docx") / "checkout.docx"
    _create_sample_docx(path)
    return path


@pytest.fixture(scope="module")
def parsed_docx(docx_path: Path) -> ParsedDocument:
    return DocxParser().parse(docx_path, "checkout.docx")
