import argparse

import numpy as np

import matplotlib.pyplot as plt

from descent import taylor


def parse_commandline():
    parser = argparse.ArgumentParser(description='Plots Taylor approximation.')
    parser.add_argument('--f', required=True, choices=taylor.available(),
                        help='Name of the function to approximate.')
    parser.add_argument('--order', type=int, default=3,
                        help='Order of the Taylor polynomial.')
    parser.add_argument('--center', type=float, default=0.0,
                        help='Taylor polynomial is centered around this value.')
    parser.add_argument('--plotrange', type=int, default=10)
    return parser.parse_args()


def main():
    args = parse_commandline()

    # Taylor polynomial
    fn = taylor.get_instance(args.f).fn
    taylor_poly = taylor.make_taylor_poly(args.f, args.order, args.center)

    # Plot fn vs approximation
    x = np.linspace(args.center - args.plotrange, args.center + args.plotrange, 100)
    plt.plot(x, fn(x), label='Original', linewidth=2)
    plt.plot(x, taylor_poly(x), label='Taylor', linewidth=2)
    plt.title('Taylor approximation for {} with N={}'.format(args.f, args.order))
    plt.legend()
    plt.show()


if __name__ == '__main__':
    main()
