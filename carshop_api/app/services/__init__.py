"""
Service layer abstraction.

Each service encapsulates the logic of one domain.  Services receive
the fixture store and the acknowledging sink explicitly, so handlers
stay thin and tests can substitute either.
"""
