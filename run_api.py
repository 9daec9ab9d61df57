"""Run the API server from project root. Use: python run_api.py"""
import uvicorn

from cv_genie.config import API_HOST, API_PORT

if __name__ == "__main__":
    uvicorn.run("cv_genie.api:app", host=API_HOST, port=API_PORT)
