import pytest


@pytest.fixture()
def sample_csv() -> str:
    """A small sales CSV with a header and three rows."""
    return (
        "month,revenue,cost,customers\n"
        "2024-01,12000,8000,140\n"
        "2024-02,13500,8200,152\n"
        "2024-03,12800,9100,149\n"
    )
