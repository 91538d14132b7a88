import pytest

from tableview.classifier import COPYABLE_KEYWORDS, is_copyable_column


@pytest.mark.parametrize(
    "key",
    ["Cluster ID", "CLUSTER_ID", "email_ADDRESS", "Name", "Homepage URL", "Filename", "uuid"],
)
def test_copyable(key: str) -> None:
    assert is_copyable_column(key) is True


@pytest.mark.parametrize("key", ["Status", "Year", "IMDB Rating", "Revenue", ""])
def test_not_copyable(key: str) -> None:
    assert is_copyable_column(key) is False


def test_keywords_are_fixed() -> None:
    assert COPYABLE_KEYWORDS == ("id", "name", "url", "email", "cluster")
