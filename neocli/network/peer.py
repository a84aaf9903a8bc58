"""Peer manager limits consumed as P2P defaults."""


class Peer:
    DEFAULT_MIN_DESIRED_CONNECTIONS = 10
    DEFAULT_MAX_CONNECTIONS = DEFAULT_MIN_DESIRED_CONNECTIONS * 4
