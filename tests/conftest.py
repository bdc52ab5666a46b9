import pytest

import modalfunction.query


@pytest.fixture(scope="session")
def engine () -> modalfunction.query.QueryEngine:

	"""One engine with the default scale and normalizer, shared by all tests."""

	return modalfunction.query.QueryEngine()
