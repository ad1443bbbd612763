from cyclespace import Graph, list_all_cycles
from cyclespace.viz.draw import draw_cycle_space


def grid(w: int, h: int) -> Graph:
    g = Graph()
    for x in range(w):
        for y in range(h):
            if x + 1 < w:
                g.add_bidirectional_edge((x, y), (x + 1, y))
            if y + 1 < h:
                g.add_bidirectional_edge((x, y), (x, y + 1))
    return g


if __name__ == "__main__":
    g = grid(3, 3)
    simple = list_all_cycles(g, simple_only=True)
    print(f"{len(simple)} simple cycles in the 3x3 grid")
    draw_cycle_space(g, simple, columns=5, save_path="grid_cycles.png")
