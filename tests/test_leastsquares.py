# -*- coding: utf-8 -*-
import pytest

import numpy as np

from fixtures import small_system, synthetic_data
from descent import DimensionMismatchError, InvalidConfigurationError
from descent.leastsquares import LinearRegression, leastsquares, step
from descent.losses import mse
from descent.optimizers import BatchGD, MiniBatchGD, SGD


def test_step_batch(small_system):
    X, y = small_system
    theta = step(np.zeros(2), BatchGD(lr=0.1), X, y)

    np.testing.assert_allclose(theta, [0.1, 0.1])


def test_step_sgd_is_sequential(small_system):
    X, y = small_system
    theta = step(np.zeros(2), SGD(lr=0.1, shuffle=False), X, y)

    # [0.1, 0] -> [0.1, 0.1] -> residual 1.8 on the last row
    np.testing.assert_allclose(theta, [0.28, 0.28])


def test_step_minibatch(small_system):
    X, y = small_system
    theta = step(np.zeros(2), MiniBatchGD(lr=0.1, batch_size=2), X, y)

    np.testing.assert_allclose(theta, [0.24, 0.24])


def test_step_does_not_mutate(small_system):
    X, y = small_system
    theta = np.zeros(2)

    new_theta = step(theta, BatchGD(lr=0.1), X, y)

    np.testing.assert_array_equal(theta, np.zeros(2))
    assert new_theta is not theta


def test_one_batch_iteration(small_system):
    X, y = small_system
    theta = leastsquares(X, y, optimizer=BatchGD(lr=0.1), theta=np.zeros(2), max_iter=1)

    np.testing.assert_allclose(theta, [0.1, 0.1])


def test_zero_iterations_is_identity(small_system):
    X, y = small_system
    theta0 = np.array([0.5, -0.5])

    theta = leastsquares(X, y, optimizer=BatchGD(lr=0.1), theta=theta0, max_iter=0)

    np.testing.assert_array_equal(theta, theta0)


def test_default_initialization(small_system):
    X, y = small_system

    theta = leastsquares(X, y, max_iter=0)

    np.testing.assert_array_equal(theta, np.zeros(2))


def test_default_optimizer_is_sgd(small_system):
    X, y = small_system

    # SGD with lr=0.001 moves away from zero but stays far from [1, 1]
    theta = leastsquares(X, y, max_iter=1)

    assert np.all(theta > 0)
    assert np.all(theta < 0.01)


def test_initial_theta_not_mutated(small_system):
    X, y = small_system
    theta0 = np.zeros(2)

    leastsquares(X, y, optimizer=BatchGD(lr=0.1), theta=theta0, max_iter=5)

    np.testing.assert_array_equal(theta0, np.zeros(2))


def test_batch_loss_decreases(synthetic_data):
    X, y, theta_true = synthetic_data
    optimizer = BatchGD(lr=0.1)

    theta = np.zeros(3)
    losses = [mse(theta, X, y)]
    for _ in range(50):
        theta = step(theta, optimizer, X, y)
        losses.append(mse(theta, X, y))

    assert all(b <= a for a, b in zip(losses, losses[1:]))
    assert losses[-1] < losses[0]


def test_batch_converges(synthetic_data):
    X, y, theta_true = synthetic_data

    errors = [
        np.linalg.norm(leastsquares(X, y, optimizer=BatchGD(lr=0.1), max_iter=n) - theta_true)
        for n in [10, 100, 1000]
    ]

    assert errors[0] > errors[1] > errors[2]
    np.testing.assert_allclose(
        leastsquares(X, y, optimizer=BatchGD(lr=0.1), max_iter=1000), theta_true, atol=1e-6)


@pytest.mark.parametrize('optimizer', [
    SGD(lr=0.05, seed=0),
    SGD(lr=0.05, shuffle=False),
    MiniBatchGD(lr=0.1, batch_size=10),
    MiniBatchGD(lr=0.1, batch_size=7, shuffle=True, seed=0),
])
def test_strategies_converge(synthetic_data, optimizer):
    X, y, theta_true = synthetic_data

    theta = leastsquares(X, y, optimizer=optimizer, max_iter=300)

    np.testing.assert_allclose(theta, theta_true, atol=1e-3)


def test_gtol_ignored_by_default(small_system):
    X, y = small_system
    optimizer = BatchGD(lr=0.5)

    fixed = leastsquares(X, y, optimizer=optimizer, max_iter=200, gtol=10.0)
    reference = leastsquares(X, y, optimizer=optimizer, max_iter=200, gtol=0.0)

    np.testing.assert_array_equal(fixed, reference)


def test_early_stopping(small_system):
    X, y = small_system
    optimizer = BatchGD(lr=0.5)

    # The gradient at zero has norm sqrt(2), already within the tolerance
    theta = leastsquares(X, y, optimizer=optimizer, max_iter=200, gtol=1.5, early_stopping=True)
    np.testing.assert_array_equal(theta, np.zeros(2))

    theta = leastsquares(X, y, optimizer=optimizer, max_iter=10000, gtol=1e-3, early_stopping=True)
    full = leastsquares(X, y, optimizer=optimizer, max_iter=10000)
    np.testing.assert_allclose(theta, [1.0, 1.0], atol=1e-2)
    assert np.linalg.norm(full - 1.0) < np.linalg.norm(theta - 1.0)


def test_negative_max_iter(small_system):
    X, y = small_system

    with pytest.raises(InvalidConfigurationError):
        leastsquares(X, y, max_iter=-1)


def test_dimension_mismatch(small_system):
    X, y = small_system

    with pytest.raises(DimensionMismatchError):
        leastsquares(X, y, theta=np.zeros(3))
    with pytest.raises(DimensionMismatchError):
        leastsquares(X, y[:2])


def test_regression_defaults():
    model = LinearRegression()

    assert isinstance(model.optimizer, SGD)
    assert model.max_iter == 100
    assert model.fit_intercept is False
    assert model.verbose is False
    assert model.gtol == 0.001
    assert model.early_stopping is False
    assert model.coef_ is None
    assert model.history == {'training': []}


def test_regression_kwargs():
    model = LinearRegression(gtol=0.1, early_stopping=True)

    assert model.gtol == 0.1
    assert model.early_stopping is True
    with pytest.raises(InvalidConfigurationError):
        LinearRegression(tol=0.1)
    with pytest.raises(InvalidConfigurationError):
        LinearRegression(max_iter=-5)


def test_regression_fit_predict(synthetic_data):
    X, y, theta_true = synthetic_data
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=500)

    assert model.fit(X, y) is model
    np.testing.assert_allclose(model.coef_, theta_true, atol=1e-6)
    np.testing.assert_allclose(model.predict(X), y, atol=1e-5)
    assert model.n_iter_ == 500
    assert len(model.history['training']) == 500


def test_regression_matches_leastsquares(small_system):
    X, y = small_system
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=20).fit(X, y)

    np.testing.assert_array_equal(
        model.coef_, leastsquares(X, y, optimizer=BatchGD(lr=0.1), max_iter=20))


def test_regression_intercept(synthetic_data):
    X, y, theta_true = synthetic_data
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=1000, fit_intercept=True)

    model.fit(X, y + 3.0)

    assert model.intercept_ == pytest.approx(3.0, abs=1e-5)
    np.testing.assert_allclose(model.coef_, theta_true, atol=1e-5)
    np.testing.assert_allclose(model.predict(X), y + 3.0, atol=1e-4)


def test_regression_loss_history(small_system):
    X, y = small_system
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=10).fit(X, y)
    history = model.loss_history()

    assert list(history.columns) == ['iteration', 'loss']
    assert list(history['iteration']) == list(range(1, 11))
    assert history['loss'].is_monotonic_decreasing


def test_regression_verbose(small_system, capsys):
    X, y = small_system
    LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=3, verbose=True).fit(X, y)

    out = capsys.readouterr().out
    assert 'Iteration 3/3' in out


def test_regression_nan_loss(small_system):
    X, y = small_system
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=1)

    with pytest.raises(ValueError, match='NaN in training loss'):
        model.fit(X, np.array([1.0, np.nan, 2.0]))


def test_regression_predict_before_fit():
    with pytest.raises(RuntimeError):
        LinearRegression().predict(np.zeros((2, 2)))


def test_regression_predict_wrong_shape(small_system):
    X, y = small_system
    model = LinearRegression(optimizer=BatchGD(lr=0.1), max_iter=1).fit(X, y)

    with pytest.raises(DimensionMismatchError):
        model.predict(np.zeros((2, 3)))


@pytest.mark.parametrize('optimizer', [
    BatchGD(lr=0.1),
    SGD(lr=0.1),
    MiniBatchGD(lr=0.1, batch_size=1),
])
def test_empty_data_set(optimizer):
    X = np.zeros((0, 2))
    y = np.zeros(0)

    with pytest.raises(DimensionMismatchError):
        leastsquares(X, y, optimizer=optimizer, max_iter=1)
    with pytest.raises(DimensionMismatchError):
        step(np.zeros(2), optimizer, X, y)
    with pytest.raises(DimensionMismatchError):
        LinearRegression(optimizer=optimizer, max_iter=1).fit(X, y)


def test_step_accepts_lists():
    theta = step([0.0, 0.0], SGD(lr=0.1, shuffle=False), [[1.0, 0.0], [0.0, 1.0]], [1.0, 1.0])

    np.testing.assert_allclose(theta, [0.1, 0.1])


def test_step_list_mismatch():
    with pytest.raises(DimensionMismatchError):
        step([0.0, 0.0], BatchGD(lr=0.1), [[1.0, 0.0], [0.0, 1.0]], [1.0])
