from mangum import Mangum

from task_manager.main import create_app

app = create_app()

# ASGI handler for serverless deployment
handler = Mangum(app, lifespan="auto")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
