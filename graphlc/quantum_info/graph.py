# This code is a Qiskit project.
#
# (C) Copyright IBM 2026.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""
Graphs describing graph states.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import rustworkx as rx

from graphlc.exceptions import InvalidGraphError
from .pauli import Pauli


class Graph:
    r"""A simple undirected graph describing the graph state :math:`|\Gamma\rangle`.

    Qubits :math:`i` and :math:`j` share a controlled-Z edge if and only if
    ``adjacency_matrix[i, j] == 1``.  The adjacency matrix is symmetric, binary and has a zero
    diagonal.  A graph is immutable once constructed.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, adjacency_matrix):
        """Create a graph from its adjacency matrix.

        Args:
            adjacency_matrix (array_like): square, symmetric 0/1 matrix with zero diagonal.

        Raises:
            InvalidGraphError: if the matrix does not describe a simple undirected graph.
        """
        adjacency = np.asarray(adjacency_matrix)
        if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
            raise InvalidGraphError(f"Adjacency matrix must be square, not {adjacency.shape}.")
        if adjacency.size and not np.isin(adjacency, (0, 1)).all():
            raise InvalidGraphError("Adjacency matrix entries must be 0 or 1.")
        adjacency = adjacency.astype(np.uint8)
        if not np.array_equal(adjacency, adjacency.T):
            raise InvalidGraphError("Adjacency matrix must be symmetric.")
        if np.any(np.diag(adjacency)):
            raise InvalidGraphError("Adjacency matrix must have a zero diagonal (no self-loops).")
        adjacency.setflags(write=False)
        self._adjacency = adjacency

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[tuple[int, int]]) -> Graph:
        """Create a graph on ``num_vertices`` vertices from an edge list.

        Raises:
            InvalidGraphError: if an edge is a self-loop or names a vertex out of range.
        """
        adjacency = np.zeros((num_vertices, num_vertices), dtype=np.uint8)
        for u, v in edges:
            if not (0 <= u < num_vertices and 0 <= v < num_vertices):
                raise InvalidGraphError(
                    f"Edge ({u}, {v}) is out of range for {num_vertices} vertices."
                )
            if u == v:
                raise InvalidGraphError(f"Self-loop on vertex {u} is not allowed.")
            adjacency[u, v] = adjacency[v, u] = 1
        return cls(adjacency)

    @classmethod
    def from_rustworkx(cls, graph: rx.PyGraph) -> Graph:
        """Create a graph from a :class:`rustworkx.PyGraph`.

        Node indices are compacted in ascending order, and parallel edges collapse into one.
        """
        index = {node: position for position, node in enumerate(sorted(graph.node_indices()))}
        return cls.from_edges(len(index), ((index[u], index[v]) for u, v in graph.edge_list()))

    def to_rustworkx(self) -> rx.PyGraph:
        """Return the graph as a :class:`rustworkx.PyGraph` with nodes ``0..n-1``."""
        graph = rx.PyGraph()
        graph.add_nodes_from(range(self.num_vertices))
        graph.add_edges_from_no_data(self.edges())
        return graph

    @property
    def num_vertices(self) -> int:
        """Number of vertices, equal to the number of qubits of the graph state."""
        return self._adjacency.shape[0]

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """The read-only ``uint8`` adjacency matrix."""
        return self._adjacency

    def edges(self) -> list[tuple[int, int]]:
        """Edges ``(u, v)`` with ``u < v`` in lexicographic order."""
        rows, cols = np.nonzero(np.triu(self._adjacency))
        return [(int(u), int(v)) for u, v in zip(rows, cols)]

    def neighbors(self, vertex: int) -> list[int]:
        """Sorted neighbors of ``vertex``."""
        return [int(v) for v in np.flatnonzero(self._adjacency[vertex])]

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` are adjacent."""
        return bool(self._adjacency[u, v])

    def degree(self, vertex: int) -> int:
        """Number of neighbors of ``vertex``."""
        return int(self._adjacency[vertex].sum())

    def stabilizer_generators(self) -> list[Pauli]:
        r"""Canonical generators :math:`K_i = X_i \prod_{j \in N(i)} Z_j` of the graph state."""
        generators = []
        for vertex in range(self.num_vertices):
            generator = Pauli.single_x(self.num_vertices, vertex)
            for neighbor in self.neighbors(vertex):
                generator.set_z(neighbor, 1)
            generators.append(generator)
        return generators

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return np.array_equal(self._adjacency, other._adjacency)

    def __hash__(self):
        return hash((self.num_vertices, self._adjacency.tobytes()))

    def __repr__(self):
        return f"Graph.from_edges({self.num_vertices}, {self.edges()})"
