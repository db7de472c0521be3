"""
Generators — produce C# source artifacts for Swashbuckle.

Each generator module exposes a ``generate_*()`` function that returns
an ``Artifact``. Every artifact starts with ``preamble.PREAMBLE``.
"""
