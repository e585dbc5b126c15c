"""AWS Lambda handler using Mangum adapter."""

from mangum import Mangum

from workforce.application import create_app
from workforce.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app()

# Lifespan runs on cold start so the infrastructure factory is built once
lambda_handler = Mangum(app, lifespan="auto")
