import json
from pathlib import Path

import pytest

SAMPLE_ROWS = [
    {
        "Name": "Emma Smith",
        "Location": "US",
        "SignupDate": "01/01/2019",
        "Source": "phone",
        "InvestmentDate": "01/10/2024",
        "InvestmentTime": "10:00",
        "RefundDate": "01/10/2024",
        "RefundTime": "13:00",
    },
    {
        "Name": "Liam Johnson",
        "Location": "US",
        "SignupDate": "01/01/2019",
        "Source": "phone",
        "InvestmentDate": "01/10/2024",
        "InvestmentTime": "10:00",
        "RefundDate": "01/10/2024",
        "RefundTime": "15:00",
    },
    {
        "Name": "Sophie Muller",
        "Location": "Europe",
        "SignupDate": "15/03/2021",
        "Source": "web app",
        "InvestmentDate": "01/06/2024",
        "InvestmentTime": "09:00",
        "RefundDate": "02/06/2024",
        "RefundTime": "00:00",
    },
    {
        "Name": "Noah Davis",
        "Location": "US",
        "SignupDate": "06/20/2022",
        "Source": "mail",
        "InvestmentDate": "04/01/2024",
        "InvestmentTime": "12:00",
        "RefundDate": "04/01/2024",
        "RefundTime": "14:00",
    },
]


@pytest.fixture(autouse=True)
def clear_record_cache():
    from refund_eval.data.customers_repository import load_dataset

    load_dataset.cache_clear()
    yield
    load_dataset.cache_clear()


@pytest.fixture
def customer_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    from refund_eval.config import settings

    path = tmp_path / "customers.json"
    path.write_text(json.dumps(SAMPLE_ROWS), encoding="utf-8")
    monkeypatch.setattr(settings, "customer_file", path)
    return path
