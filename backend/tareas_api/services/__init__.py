"""Services Layer — combine configuration with core logic and infrastructure.

Invariants:
    - Services receive Settings by injection; they never read os.environ
"""
