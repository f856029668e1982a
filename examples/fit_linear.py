import argparse

import matplotlib.pyplot as plt

import descent.metrics as metrics

from descent.datasets import load_csv, make_linear
from descent.leastsquares import LinearRegression
from descent.optimizers import BatchGD, MiniBatchGD, SGD


def prepare_data(args):
    """Returns the design matrix and targets for fitting."""
    if args.data_path:
        return load_csv(args.data_path, args.target)

    X, y, theta = make_linear(
        args.n_samples, args.n_features, noise=args.noise, seed=args.seed)
    print('True parameters: {}'.format(theta))
    return X, y


def make_optimizer(args):
    if args.optimizer == 'batch':
        return BatchGD(lr=args.lr)
    if args.optimizer == 'minibatch':
        return MiniBatchGD(lr=args.lr, batch_size=args.batch_size, seed=args.seed)
    return SGD(lr=args.lr, shuffle=not args.no_shuffle, seed=args.seed)


def main():
    parser = argparse.ArgumentParser(description='Fit a linear model by gradient descent')
    parser.add_argument('--data_path', help='CSV file, synthetic data if omitted')
    parser.add_argument('--target', default='y')
    parser.add_argument('--optimizer', choices=['sgd', 'minibatch', 'batch'], default='sgd')
    parser.add_argument('--lr', type=float, default=0.01)
    parser.add_argument('--batch_size', type=int, default=32)
    parser.add_argument('--no_shuffle', action='store_true')
    parser.add_argument('--max_iter', type=int, default=100)
    parser.add_argument('--fit_intercept', action='store_true')
    parser.add_argument('--n_samples', type=int, default=200)
    parser.add_argument('--n_features', type=int, default=3)
    parser.add_argument('--noise', type=float, default=0.1)
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()

    X, y = prepare_data(args)

    model = LinearRegression(
        optimizer=make_optimizer(args),
        max_iter=args.max_iter,
        fit_intercept=args.fit_intercept,
        verbose=True
    )
    model.fit(X, y)
    y_pred = model.predict(X)

    print('Coefficients: {}'.format(model.coef_))
    print('Intercept: {}'.format(model.intercept_))
    print('RMSE: {}'.format(metrics.rmse(y_pred, y)))
    print('R2: {}'.format(metrics.r2(y_pred, y)))

    history = model.loss_history()
    plt.plot(history['iteration'], history['loss'])
    plt.yscale('log')
    plt.xlabel('Iteration')
    plt.ylabel('Training loss')
    plt.show()


if __name__ == '__main__':
    main()
