# -*- coding: utf-8 -*-
import pytest

import numpy as np


@pytest.fixture(scope='module')
def small_system():
    X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    y = np.array([1.0, 1.0, 2.0])
    return X, y


@pytest.fixture(scope='module')
def synthetic_data():
    rng = np.random.default_rng(0)
    N = 50
    M = 3
    theta = np.array([1.5, -2.0, 0.5])
    X = rng.standard_normal((N, M))
    y = X @ theta
    return X, y, theta


@pytest.fixture
def sample_csv(tmp_path):
    filename = tmp_path / 'linear_data.csv'
    filename.write_text(
        'x1,x2,y\n'
        '1.0,0.0,1.0\n'
        '0.0,1.0,1.0\n'
        '1.0,1.0,2.0\n'
        '2.0,,3.0\n'
    )
    return str(filename)
