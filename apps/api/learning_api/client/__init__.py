from learning_api.client.gateway import API_BASE_URL, ApiGateway, ApiResponse

__all__ = ["API_BASE_URL", "ApiGateway", "ApiResponse"]
