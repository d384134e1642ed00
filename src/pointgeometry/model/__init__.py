"""
The MODEL layer contains the pure geometry: value types and the distance,
projection and closest-point solvers built on them.
It performs no I/O and keeps no state between calls.
"""
