"""
Stiffness and mass matrices of bilinear (4-node) and trilinear (8-node)
reference elements, integrated with Gauss-Legendre quadrature.
"""

import itertools
import logging

import numpy as np

from gauss_integral import surface_2d, volume_3d
from gauss_integral.runtime import reset_logging


logger = logging.getLogger(__name__)


def main():
    reset_logging()
    np.set_printoptions(precision=4, suppress=True)

    corners_2d = np.array([[-1, -1], [1, -1], [1, 1], [-1, 1]])
    K = surface_2d(lambda xi, eta: stiffness_integrand(corners_2d, xi, eta), 2, -1, 1)
    M = surface_2d(lambda xi, eta: mass_integrand(corners_2d, xi, eta), 2, -1, 1)
    logger.info(f"Quad4 stiffness matrix:\n{K}")
    logger.info(f"Quad4 mass matrix:\n{M}")

    corners_3d = np.array(list(itertools.product([-1, 1], repeat=3)))
    K = volume_3d(lambda xi, eta, mu: stiffness_integrand(corners_3d, xi, eta, mu), 2, -1, 1, workers=4)
    logger.info(f"Hex8 stiffness matrix, diagonal: {np.diag(K)}")
    logger.info(f"Hex8 stiffness matrix, row sums: {K.sum(axis=1)}")


def shape_functions(corners: np.ndarray, *coords):
    return np.prod([(1 + corners[:, d] * x) / 2 for [d, x] in enumerate(coords)], axis=0)


def shape_gradients(corners: np.ndarray, *coords):
    nb_dims = len(coords)
    gradients = np.empty((nb_dims, corners.shape[0]))
    for d in range(nb_dims):
        factors = [corners[:, d] / 2 if k == d else (1 + corners[:, k] * x) / 2 for [k, x] in enumerate(coords)]
        gradients[d] = np.prod(factors, axis=0)
    return gradients


def stiffness_integrand(corners, *coords):
    B = shape_gradients(corners, *coords)
    return B.T @ B


def mass_integrand(corners, *coords):
    N = shape_functions(corners, *coords)
    return np.outer(N, N)


if __name__ == "__main__":
    main()
