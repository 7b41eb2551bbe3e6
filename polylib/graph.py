# This code is licensed under the MIT License (see LICENSE file for details)

import collections
import heapq
import logging

import numpy

logger = logging.getLogger(__name__)

BranchPaths = collections.namedtuple('BranchPaths', ('distances', 'branch_factors'))

def dijkstra_with_branches(adjacency, weights, branch_degrees, start, n_nodes):
    """Find shortest-path distances from a start node, along with the branch
    factor accumulated along each shortest path.

    Each edge u->v carries a weight and a branch degree (the number of ways the
    network branches at that edge). The branch factor of a node is the product
    of max(1, degree - 1) over the edges of its shortest path from the start.

    Parameters:
        adjacency: list of length n_nodes; adjacency[u] lists the (0-based)
            nodes reachable from u by a single edge.
        weights: list of length n_nodes; weights[u][i] is the weight of the
            edge u -> adjacency[u][i].
        branch_degrees: list of length n_nodes; branch_degrees[u][i] is the
            branch degree of the edge u -> adjacency[u][i].
        start: index of the start node.
        n_nodes: number of nodes in the graph.

    Returns: BranchPaths (distances, branch_factors), each an array of length
        n_nodes. Unreachable nodes have distance inf and branch factor 1.

    Example:
        adjacency, weights, degrees = from_edges([(0, 1, 1, 3), (1, 2, 1, 1)], 3)
        distances, branch_factors = dijkstra_with_branches(adjacency, weights, degrees, 0, 3)
        # distances == [0, 1, 2]; branch_factors == [1, 2, 2]
    """
    if not 0 <= start < n_nodes:
        raise ValueError('start node {} is not in the range [0, {})'.format(start, n_nodes))
    if not len(adjacency) == len(weights) == len(branch_degrees) == n_nodes:
        raise ValueError('adjacency, weights and branch_degrees must each have one entry per node')

    distances = numpy.full(n_nodes, numpy.inf)
    branch_factors = numpy.ones(n_nodes)
    distances[start] = 0
    queue = [(0.0, start)]
    while queue:
        d, u = heapq.heappop(queue)
        if d > distances[u]:
            continue # stale entry: u was already reached by a shorter path
        neighbors, weights_u, degrees_u = adjacency[u], weights[u], branch_degrees[u]
        if not len(neighbors) == len(weights_u) == len(degrees_u):
            raise ValueError('edge lists for node {} have mismatched lengths'.format(u))
        for v, weight, degree in zip(neighbors, weights_u, degrees_u):
            new_distance = distances[u] + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                branch_factors[v] = branch_factors[u] * max(1, degree - 1)
                heapq.heappush(queue, (new_distance, v))
    logger.debug('reached %d of %d nodes from node %d', numpy.isfinite(distances).sum(), n_nodes, start)
    return BranchPaths(distances, branch_factors)

def from_edges(edges, n_nodes):
    """Build per-node adjacency, weight and branch-degree lists from a list of
    (u, v, weight, branch_degree) edge tuples, for use with dijkstra_with_branches()."""
    adjacency = [[] for _ in range(n_nodes)]
    weights = [[] for _ in range(n_nodes)]
    branch_degrees = [[] for _ in range(n_nodes)]
    for u, v, weight, degree in edges:
        adjacency[u].append(v)
        weights[u].append(weight)
        branch_degrees[u].append(degree)
    return adjacency, weights, branch_degrees
