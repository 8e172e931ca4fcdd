# bucketsearch/search/astar.py
# "A*" search over bucket states: a FIFO frontier of whole paths that keeps
# only the best known path to each state

from collections import OrderedDict

from bucketsearch.core.logging import BucketSearchLogger
from bucketsearch.core.methods.path_utils import remove_cycles, append, find_shortest
from bucketsearch.search.base import SearchAlgorithm

logger = BucketSearchLogger.get_logger('search.astar')


class BestFirst(SearchAlgorithm):
    """
    Best known path search, traditionally called A* in this project.

    There is no heuristic: the frontier maps each state to the best path
    found so far that ends in it, and paths are taken out in the order they
    were (re)inserted. When a state is reached again, the stored path and the
    new one are compared and the shorter one goes to the back of the frontier;
    on a tie the stored path wins.

    The frontier holds at most one path per state.
    """

    name = 'AS'

    def __init__(self):
        super().__init__()
        self.frontier = OrderedDict()

    def execute(self, root, target):
        """
        Searches paths from root until one ends in target or the frontier
        runs out.

        Args:
            root: The starting Node
            target: The Node to reach

        Returns:
            list: A path from root to target, or None
        """
        self.frontier.clear()
        self.frontier[root.state] = (root,)
        self.nodes_expanded = 0
        logger.info(f"A* search from {root} to {target}")

        while self.frontier:
            _, current_path = self.frontier.popitem(last=False)
            last_node = current_path[-1]
            self.nodes_expanded += 1

            if last_node == target:
                logger.info(f"A* reached {target} in {len(current_path)} states "
                            f"({self.nodes_expanded} paths expanded)")
                return list(current_path)

            logger.debug(f"A* expanding path of length {len(current_path)} ending in {last_node}")
            children = remove_cycles(last_node.breed(), current_path)
            self._merge(children, current_path)

        logger.info(f"A* frontier exhausted without reaching {target}")
        return None

    def _merge(self, children, current_path):
        for child in children:
            new_path = append(current_path, child)
            other = self.frontier.pop(child.state, None)

            if other is None:
                self.frontier[child.state] = new_path
            else:
                # Keeps the stored path unless the new one is strictly shorter
                self.frontier[child.state] = find_shortest([other, new_path])


AStar = BestFirst
