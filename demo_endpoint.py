"""
Quick demo script to run the form endpoints locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Infinity Landing Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Contact:       POST http://localhost:8000/api/contact")
    print("   - Beta signup:   POST http://localhost:8000/api/beta-signup")
    print("   - Skills:        GET  http://localhost:8000/api/skills?lang=en")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("✉️  Email:")
    print("   Set RESEND_API_KEY and ADMIN_EMAIL in .env, otherwise")
    print("   valid submissions answer 500 SERVER_ERROR.")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/contact" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name": "Alice", "email": "a@b.com", "message": "Hello, this is a real inquiry.", "lang": "en"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
