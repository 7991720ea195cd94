import pytest

from algorithms.step import ArrayStep
from engine import ManualScheduler, PlaybackController, StepSequence
from main import create_app


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------
def make_sequence(count: int) -> StepSequence:
    return StepSequence(
        ArrayStep(array=[i], message=f"step {i}", line_number=0) for i in range(count)
    )


@pytest.fixture
def ten_steps():
    return make_sequence(10)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(scheduler):
    return PlaybackController(scheduler=scheduler, speed_ms=100)


# ---------------------------------------------------------------------------
# Web fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def app():
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "MAX_INPUT_LENGTH": 50})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
