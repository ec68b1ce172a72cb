"""条目定位测试"""

from hostentry.locator import find_entries, find_entry
from hostentry.parser import parse_text

HOSTS = parse_text(
    "# web servers\n"
    "10.0.0.1\twebserver\n"
    "10.0.0.2\thost12 www\n"
    "\n"
    "10.0.0.3\thost1 # host1 lives here\n"
    "10.0.0.4\thost1\n"
)


def test_first_match_wins() -> None:
    index, entry = find_entry(HOSTS, "host1")
    assert index == 4
    assert entry.ip_address == "10.0.0.3"


def test_no_substring_matching() -> None:
    assert find_entry(HOSTS, "web") is None
    assert find_entry(HOSTS, "host") is None


def test_comment_text_is_not_a_hostname() -> None:
    assert find_entry(HOSTS, "lives") is None


def test_ip_address_is_not_a_hostname() -> None:
    assert find_entry(HOSTS, "10.0.0.1") is None


def test_find_entries_in_order() -> None:
    assert [index for index, _ in find_entries(HOSTS, "host1")] == [4, 5]


def test_opaque_lines_are_skipped() -> None:
    assert find_entry(parse_text("# 10.0.0.1 hidden\n"), "hidden") is None
