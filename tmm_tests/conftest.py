import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "lowconfidence: relies on formulas not yet checked against an independent "
        "reference tool (psi/delta, absorbing incident medium)",
    )


@pytest.fixture
def quarter_wave():
    """Air | n=2 quarter-wave film at 600 | n=1.5 substrate."""
    from torch_thinfilm import Layer

    wavelength = 600.0
    return wavelength, [Layer(wavelength / (4 * 2.0), 2.0, name="QW")]
