from .incidence import IncidenceVector, cycle_edges, encode_cycle, decode_vector

__all__ = [
    "IncidenceVector",
    "cycle_edges",
    "encode_cycle",
    "decode_vector",
]
