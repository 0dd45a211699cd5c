"""
Use cases for the Clientes API.

Services receive their repository through the constructor and are the only
place where writes are validated. Routers call these services instead of
touching repositories or sessions directly.
"""
