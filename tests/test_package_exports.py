import pytest

import labquote
import labquote.core as core
from labquote.core.selection import SelectionStore
from labquote.core.validate import validate_tax_id


def test_package_lazy_exports_resolve_to_core_objects() -> None:
    assert labquote.SelectionStore is SelectionStore
    assert labquote.validate_tax_id is validate_tax_id
    assert core.submit_quote.__name__ == "submit_quote"
    assert isinstance(labquote.__version__, str)


def test_unknown_attribute_raises_attribute_error() -> None:
    with pytest.raises(AttributeError):
        labquote.does_not_exist
