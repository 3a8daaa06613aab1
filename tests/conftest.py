import pytest

from densematrix import backends


@pytest.fixture(params=["python", "numpy"])
def backend(request):
    """Run a test once per kernel backend, restoring the previous selection."""

    previous = backends.active_backend()
    previous_strict = backends.is_strict()
    selected = backends.configure(backend=request.param, strict=True)
    if selected != request.param:
        backends.configure(backend=previous, strict=previous_strict)
        pytest.skip("%s backend unavailable" % request.param)
    try:
        yield selected
    finally:
        backends.configure(backend=previous, strict=previous_strict)
