from cyclespace import Graph, list_all_cycles, format_edges, describe_element

g = Graph()
g.add_bidirectional_edge((2, 1), (2, 5))
g.add_bidirectional_edge((2, 1), (3, 1))
g.add_bidirectional_edge((2, 5), (4, 5))
g.add_bidirectional_edge((3, 1), (6, 1))
g.add_bidirectional_edge((3, 1), (4, 5))
g.add_bidirectional_edge((4, 5), (7, 5))
g.add_bidirectional_edge((7, 5), (7, 2))
g.add_bidirectional_edge((7, 5), (9, 5))
g.add_bidirectional_edge((9, 5), (9, 4))
g.add_bidirectional_edge((9, 4), (7, 2))
g.add_bidirectional_edge((9, 4), (9, 1))
g.add_bidirectional_edge((9, 1), (7, 1))
g.add_bidirectional_edge((7, 1), (7, 2))
g.add_bidirectional_edge((7, 1), (6, 1))
g.add_bidirectional_edge((7, 2), (6, 1))

cycles = list_all_cycles(g)
for cycle in cycles:
    print(format_edges(cycle))

print(f"{len(cycles)} cycle-space elements")
print("kinds:", sorted({describe_element(c) for c in cycles}))
