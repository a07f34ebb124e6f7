from fastapi import Request

from services.gemini import ModelGateway


def get_gateway(request: Request) -> ModelGateway:
    """The gateway built once at start-up (see `main.create_app`)."""
    return request.app.state.gateway
