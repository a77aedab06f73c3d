import pytest

from wsq_subband import exceptions


@pytest.mark.parametrize("name", exceptions.__all__)
def test_all_exceptions_are_value_errors(name):
    exception_type = getattr(exceptions, name)
    assert issubclass(exception_type, ValueError)
    assert exception_type.__doc__
