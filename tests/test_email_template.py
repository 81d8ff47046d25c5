import sys
from pathlib import Path

PROJECT_DIR = Path(__file__).resolve().parents[1]
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

from src.shared.contact.email_template import render_contact_email, split_message_lines


def test_each_line_becomes_a_paragraph():
    html = render_contact_email("Jo", "jo@example.com", "First line\nSecond line\n\nFourth line")

    assert html.count('<p style="margin: 0 0 8px">') == 2 + 4
    assert ">First line</p>" in html
    assert ">Second line</p>" in html
    assert "></p>" in html
    assert ">Fourth line</p>" in html


def test_sender_details_are_included():
    html = render_contact_email("Jo", "jo@example.com", "Hello there, this is long enough.")

    assert "<strong>Name:</strong> Jo" in html
    assert "<strong>Email:</strong> jo@example.com" in html


def test_user_input_is_escaped():
    html = render_contact_email(
        "<b>Jo</b>",
        "jo@example.com",
        "<script>alert('x')</script>\n<p>nested</p>",
    )

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;Jo&lt;/b&gt;" in html
    assert "&lt;p&gt;nested&lt;/p&gt;" in html


def test_windows_line_endings_split_like_unix():
    assert split_message_lines("one\r\ntwo\nthree") == ["one", "two", "three"]
