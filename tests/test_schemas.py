"""Tests for user request/response schemas."""
import pytest
from pydantic import ValidationError

from models.user import User
from schemas.user import IndustryIn, UserOut


def test_industry_is_stripped():
    assert IndustryIn(industry="  Data Science ").industry == "Data Science"


def test_blank_industry_is_invalid():
    with pytest.raises(ValidationError):
        IndustryIn(industry="   ")


def test_user_out_reads_orm_object():
    user = User(auth_id="user_1", email="a@b.c", industry="Retail")

    out = UserOut.model_validate(user)

    assert out.model_dump() == {"auth_id": "user_1", "email": "a@b.c", "industry": "Retail"}
