import numpy as np
import pytest

from wengert import ResidualModel, dual_grad

# NIST StRD Thurber (semiconductor electron mobility), higher difficulty
THURBER_X = np.array([
    -3.067, -2.981, -2.921, -2.912, -2.840, -2.797, -2.702, -2.699, -2.633, -2.481,
    -2.363, -2.322, -1.501, -1.460, -1.274, -1.212, -1.100, -1.046, -0.915, -0.714,
    -0.566, -0.545, -0.400, -0.309, -0.109, -0.103, 0.010, 0.119, 0.377, 0.790,
    0.963, 1.006, 1.115, 1.572, 1.841, 2.047, 2.200,
])
THURBER_Y = np.array([
    80.574, 84.248, 87.264, 87.195, 89.076, 89.608, 89.868, 90.101,
    92.405, 95.854, 100.696, 101.060, 401.672, 390.724, 567.534, 635.316,
    733.054, 759.087, 894.206, 990.785, 1090.109, 1080.914, 1122.643, 1178.351,
    1260.531, 1273.514, 1288.339, 1327.543, 1353.863, 1414.509, 1425.208, 1421.384,
    1442.962, 1464.350, 1468.705, 1447.894, 1457.628,
])
START1 = [1000.0, 1000.0, 400.0, 40.0, 0.7, 0.3, 0.03]
START2 = [1300.0, 1500.0, 500.0, 75.0, 1.0, 0.4, 0.05]
CERTIFIED = [
    1.2881396800E+03, 1.4910792535E+03, 5.8323836877E+02, 7.5416644291E+01,
    9.6629502864E-01, 3.9797285797E-01, 4.9727297349E-02,
]
CERTIFIED_RSS = 5.6427082397E+03


def thurber_point(beta, x, y):
    xx = x * x
    xxx = xx * x
    num = beta[0] + beta[1] * x + beta[2] * xx + beta[3] * xxx
    den = 1 + beta[4] * x + beta[5] * xx + beta[6] * xxx
    return num / den - y


def thurber(beta, xs, ys):
    return [thurber_point(beta, x, y) for x, y in zip(xs, ys)]


def test_residuals_and_jacobian_shapes():
    model = ResidualModel(thurber, 7)
    r = model.residuals(START1, THURBER_X, THURBER_Y)
    J = model.jacobian(START1, THURBER_X, THURBER_Y)
    assert r.shape == (37,)
    assert J.shape == (37, 7)
    assert r[0] == pytest.approx(float(thurber_point(START1, THURBER_X[0], THURBER_Y[0])))


def test_jacobian_rows_match_forward_mode():
    model = ResidualModel(thurber, 7)
    J = model.jacobian(START2, THURBER_X, THURBER_Y)
    for i in (0, 12, 36):
        _, row = dual_grad(lambda b: thurber_point(b, THURBER_X[i], THURBER_Y[i]), START2)
        np.testing.assert_allclose(J[i], row, rtol=1e-9, atol=1e-9)


def test_tape_is_reused_between_evaluations():
    model = ResidualModel(thurber, 7)
    model.jacobian(START1, THURBER_X, THURBER_Y)
    length = model.tape.length()
    model.jacobian(START2, THURBER_X, THURBER_Y)
    assert model.tape.length() == length


def test_constant_residual_has_zero_row():
    model = ResidualModel(lambda p: [p[0] * 2 + p[1], 3.0], 2)
    np.testing.assert_allclose(model.residuals([1.0, 1.0]), [3.0, 3.0])
    np.testing.assert_allclose(model.jacobian([1.0, 1.0]), [[2.0, 1.0], [0.0, 0.0]])


def test_wrong_parameter_count():
    model = ResidualModel(thurber, 7)
    with pytest.raises(ValueError):
        model.residuals([1.0, 2.0], THURBER_X, THURBER_Y)


@pytest.mark.parametrize("start", [START1, START2])
def test_thurber_levenberg_marquardt(start):
    model = ResidualModel(thurber, 7)
    result = model.fit(start, THURBER_X, THURBER_Y, ftol=1e-12, xtol=1e-12)
    assert 2 * result.cost == pytest.approx(CERTIFIED_RSS, rel=1e-4)
    np.testing.assert_allclose(result.x, CERTIFIED, rtol=1e-4)
