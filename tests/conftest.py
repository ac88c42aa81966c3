import pytest

from splitledger.schemas.member import Member


@pytest.fixture
def members():
    return [
        Member(id="A", name="Alice"),
        Member(id="B", name="Bob"),
        Member(id="C", name="Carol", claimed_by="user-42"),
    ]
