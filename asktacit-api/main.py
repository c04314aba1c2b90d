from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from routes import assistant, records, diagnostics
from core.config import settings

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="AskTacit API: RFP and cybersecurity answers powered by Alltius, saved to Airtable.",
    version="1.0.0",
    debug=settings.DEBUG,
    docs_url="/swagger"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(assistant.router, prefix=settings.API_PREFIX, tags=["Assistant"])
app.include_router(records.router, prefix=settings.API_PREFIX, tags=["Records"])
app.include_router(diagnostics.router, prefix=settings.API_PREFIX, tags=["Diagnostics"])

# Custom Swagger UI route
@app.get("/docs", include_in_schema=False)
async def custom_swagger_ui_html():
    return get_swagger_ui_html(
        openapi_url=app.openapi_url,
        title=f"{settings.PROJECT_NAME} - Swagger UI",
        swagger_js_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5.9.0/swagger-ui-bundle.js",
        swagger_css_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5.9.0/swagger-ui.css",
    )

@app.get("/", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "message": "Service is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
