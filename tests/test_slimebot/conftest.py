import pytest


@pytest.fixture
def mocker(mocker):
    """
    Extend the global mocker fixture with a coroutine mock and non-callable mocks.

    Args:
        mocker: Global mocker fixture as exported by pytest-mock.

    Returns:
        Modified mocker fixture that additionally supports `CoroMock`,
        :class:`unittest.mock.NonCallableMock` and :class:`unittest.mock.NonCallableMagicMock`.
    """
    mocker.CoroMock = mocker.AsyncMock
    mocker.NonCallableMock = mocker.mock_module.NonCallableMock
    mocker.NonCallableMagicMock = mocker.mock_module.NonCallableMagicMock
    return mocker
