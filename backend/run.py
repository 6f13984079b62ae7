#!/usr/bin/env python3
"""
Online Learning Platform API - Startup Script
Run this file to start the server with proper configuration
"""

import os
import sys
from pathlib import Path


def check_environment():
    """Check if environment is properly set up"""
    print("🔍 Checking environment setup...")

    from dotenv import load_dotenv

    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)
    else:
        print("⚠️  WARNING: .env file not found, using defaults and process environment")

    if not os.getenv("MONGODB_URI"):
        print("⚠️  WARNING: MONGODB_URI is not set, falling back to mongodb://localhost:27017")

    print("✅ Environment check passed!")
    return True


def check_dependencies():
    """Check if all dependencies are installed"""
    print("\n🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pymongo
        print("✅ All core dependencies installed!")
        return True
    except ImportError as e:
        print(f"❌ ERROR: Missing dependency: {e}")
        print("\n📦 Install dependencies with:")
        print("   pip install -e .")
        return False


def print_banner():
    """Print startup banner"""
    banner = """
╔═══════════════════════════════════════════════════╗
║                                                   ║
║           Online Learning Platform API            ║
║                                                   ║
║                  Backend Server                   ║
║                   Version 1.0.0                   ║
║                                                   ║
╚═══════════════════════════════════════════════════╝
    """
    print(banner)


def print_startup_info(port: int):
    """Print startup information"""
    print("\n🚀 Starting server...")
    print("\n📚 Once started, you can access:")
    print(f"   • API Docs (Swagger): http://localhost:{port}/docs")
    print(f"   • Health Check:       http://localhost:{port}/health")
    print("\n💡 Press CTRL+C to stop the server")
    print("\n" + "="*55 + "\n")


def main():
    """Main startup function"""
    print_banner()

    if not check_environment():
        sys.exit(1)

    if not check_dependencies():
        sys.exit(1)

    try:
        import uvicorn
        from learnhub.config import settings

        print_startup_info(settings.port)

        uvicorn.run(
            "learnhub.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.LOG_LEVEL.lower()
        )
    except KeyboardInterrupt:
        print("\n\n👋 Server stopped by user")
    except Exception as e:
        print(f"\n❌ ERROR: Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
