import numpy as np
import pytest

from pigment_mixing import PigmentTransform


class LinearStubTransform(PigmentTransform):
    """Injective linear map into a 5-D latent space; exact to invert."""

    latent_size = 5

    matrix = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.5, 0.5, 0.0],
        [0.0, 0.25, 0.75],
    ])

    def to_latent(self, linear_rgb):
        return self.matrix @ np.asarray(linear_rgb, dtype=np.float64)

    def to_rgb(self, latent):
        return np.linalg.pinv(self.matrix) @ np.asarray(latent, dtype=np.float64)


@pytest.fixture
def stub_transform():
    return LinearStubTransform()
