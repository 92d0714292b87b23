"""
Storage layer.

``base`` defines the ``Store`` contract and ``PageRequest``; ``memory``
holds the in-memory implementation used for persons and
``product_repository`` the SQLAlchemy-backed one used for products.
"""
