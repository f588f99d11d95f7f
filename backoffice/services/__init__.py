"""
High-level use cases for the back-office API.

Each service orchestrates SQLRepository calls to implement one business action
and returns either the result or an ApplicationError. Routers call these
services instead of touching sessions directly.
"""
