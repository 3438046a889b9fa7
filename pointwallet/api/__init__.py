from pointwallet.api.router import register_routes

__all__ = ["register_routes"]
