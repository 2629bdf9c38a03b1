import pytest

from artwheel.wheel import WheelModel, render_wheel_bitmap


@pytest.fixture(scope="session")
def small_model():
    return WheelModel.from_size(64)


@pytest.fixture(scope="session")
def small_bitmap(small_model):
    return render_wheel_bitmap(small_model)
