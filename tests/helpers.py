from bs4 import BeautifulSoup

CANONICAL_HEADERS = ["Data", "Horário", "Manobra", "Berço", "Navio", "Situação"]
CANONICAL_ROW = ["21/02/2026", "10:30", "ATRACACAO", "201", "NAVIO TESTE", "CONFIRMADA"]


def make_table_html(headers, *rows):
    """Render a single <table> with a header row and data rows."""
    header_html = "".join(f"<th>{h}</th>" for h in headers)
    rows_html = "".join(
        "<tr>" + "".join(f"<td>{value}</td>" for value in row) + "</tr>" for row in rows
    )
    return f"<table><tr>{header_html}</tr>{rows_html}</table>"


def make_document(headers, *rows):
    return BeautifulSoup(make_table_html(headers, *rows), "html.parser")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text="", status_code=200, error=None):
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code
        self._error = error

    def raise_for_status(self):
        if self._error is not None:
            raise self._error
