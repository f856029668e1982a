from .exceptions import DescentError, DimensionMismatchError, InvalidConfigurationError
from .gradient_descent import steepest_descent
from .leastsquares import LinearRegression, leastsquares, step
from .losses import mse, mse_gradient
from .optimizers import BatchGD, MiniBatchGD, Optimizer, SGD

__version__ = '0.1'
