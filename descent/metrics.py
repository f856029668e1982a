import numpy as np
import warnings

from .exceptions import DimensionMismatchError


def _prepare(y_pred:np.array, y_true:np.array):
    """Checks shapes and drops entries with non-finite predictions."""
    y_pred = np.asarray(y_pred, dtype=float)
    y_true = np.asarray(y_true, dtype=float)
    if y_pred.shape != y_true.shape:
        raise DimensionMismatchError('y_pred and y_true need to have the same shape')

    mask = np.isfinite(y_pred)
    if not np.all(mask):
        warnings.warn('Removing {} of {} non-finite predictions.'.format(
            y_pred.size - np.count_nonzero(mask), y_pred.size))
        y_pred, y_true = y_pred[mask], y_true[mask]

    return y_pred, y_true


def mae(y_pred:np.array, y_true:np.array) -> float:
    """Computes mean absolute error (MAE)

    Arguments:
        * y_pred: model predictions (n_samples,)
        * y_true: ground truth values (n_samples,)

    """
    y_pred, y_true = _prepare(y_pred, y_true)

    return float(np.mean(np.abs(y_pred - y_true)))


def mse(y_pred:np.array, y_true:np.array) -> float:
    """Computes mean squared error (MSE)

    Unlike :func:`descent.losses.mse` this is the plain average of squared
    residuals, suitable for comparing models.

    Arguments:
        * y_pred: model predictions (n_samples,)
        * y_true: ground truth values (n_samples,)

    """
    y_pred, y_true = _prepare(y_pred, y_true)

    return float(np.mean(np.square(y_pred - y_true)))


def rmse(y_pred:np.array, y_true:np.array) -> float:
    """Computes root mean squared error (RMSE)

    Arguments:
        * y_pred: model predictions (n_samples,)
        * y_true: ground truth values (n_samples,)

    """
    return float(np.sqrt(mse(y_pred, y_true)))


def r2(y_pred:np.array, y_true:np.array) -> float:
    """Computes the coefficient of determination (R^2)

    Arguments:
        * y_pred: model predictions (n_samples,)
        * y_true: ground truth values (n_samples,)

    """
    y_pred, y_true = _prepare(y_pred, y_true)

    ss_res = np.sum(np.square(y_true - y_pred))
    ss_tot = np.sum(np.square(y_true - np.mean(y_true)))
    if ss_tot == 0:
        # Constant targets, R^2 is undefined unless the fit is perfect
        return 1.0 if ss_res == 0 else 0.0

    return float(1 - ss_res / ss_tot)
