from labquote.core.canonical import QuoteForm
from labquote.core.validate import validate_quote_form


def _valid_form(**overrides) -> QuoteForm:
    data = {
        "company_name": "Clinica San Pablo",
        "company_tax_id": "20100070970",
        "contact_name": "Ana Torres",
        "email": "compras@sanpablo.com.pe",
        "phone": "+51 (1) 610-3333",
        "estimated_quantity": "3 units",
        "message": "",
    }
    data.update(overrides)
    return QuoteForm(**data)


def test_validate_quote_form_accepts_complete_form_with_selection() -> None:
    report = validate_quote_form(_valid_form(), [7, 12])

    assert report.valid is True
    assert report.issues == []


def test_validate_quote_form_collects_one_issue_per_invalid_field() -> None:
    form = _valid_form(company_name=" ", company_tax_id="30123456789", email="a@b", phone="12")

    report = validate_quote_form(form, [7])

    assert report.valid is False
    assert [(issue.field, issue.code) for issue in report.issues] == [
        ("company_name", "required_empty"),
        ("company_tax_id", "tax_id_prefix"),
        ("email", "email_shape"),
        ("phone", "phone_length"),
    ]
    assert report.errors_by_field()["company_name"] == "Company name is required"


def test_validate_quote_form_requires_a_selection() -> None:
    report = validate_quote_form(_valid_form(), [])

    assert report.valid is False
    assert report.issues[0].code == "empty_selection"
    assert report.issues[0].field == "product_ids"


def test_validate_quote_form_ignores_free_text_fields() -> None:
    report = validate_quote_form(_valid_form(estimated_quantity="", message="x" * 5000), [1])

    assert report.valid is True
