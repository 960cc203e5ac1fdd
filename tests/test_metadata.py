from __future__ import annotations

from pydantic import BaseModel, Field

from webcontrib.localization import MappingStringSource, ResourceStringProvider, describe_model


class SignUpForm(BaseModel):
    user_name: str
    email: str = Field(title="Email address", description="Where we send receipts.")
    comment: str | None = None


def test_describe_model_uses_translations():
    provider = ResourceStringProvider(
        MappingStringSource(
            {
                "SignUpForm_user_name": "Användarnamn",
                "SignUpForm_user_name_Watermark": "t.ex. ada",
                "SignUpForm_user_name_ShortDisplayText": "Namn",
                "SignUpForm_email_Description": "Dit vi skickar kvitton.",
                "SignUpForm_comment_NullDisplayText": "(ingen kommentar)",
            }
        )
    )

    described = describe_model(SignUpForm, provider)

    assert list(described) == ["user_name", "email", "comment"]
    assert described["user_name"].display_name == "Användarnamn"
    assert described["user_name"].watermark == "t.ex. ada"
    assert described["user_name"].short_display_text == "Namn"
    assert described["email"].description == "Dit vi skickar kvitton."
    assert described["comment"].null_display_text == "(ingen kommentar)"


def test_describe_model_falls_back_to_declared_metadata():
    described = describe_model(SignUpForm, ResourceStringProvider())

    assert described["user_name"].display_name == "user_name"
    assert described["user_name"].description is None
    assert described["email"].display_name == "Email address"
    assert described["email"].description == "Where we send receipts."
    assert described["comment"].watermark is None
    assert described["comment"].null_display_text is None
