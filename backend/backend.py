from flask import Flask, jsonify
from flask_cors import CORS
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app_settings import Settings
from care_plan_api import care_plan_bp, CORS_HEADERS

settings = Settings.from_env()

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)

if not settings.openai_configured:
    logger.warning("⚠️ OPENAI_API_KEY not found in environment variables - plan endpoints will return errors")

app = Flask(__name__)
CORS(app, resources={r"/api/*": {
    "origins": "*",
    "allow_headers": CORS_HEADERS["Access-Control-Allow-Headers"].split(", "),
}})

app.register_blueprint(care_plan_bp)
logger.info("✅ Care plan API blueprint registered")


@app.route("/", methods=["GET"])
def index():
    return jsonify({"service": "pet-care-plans", "status": "ok"})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    app.run(host="0.0.0.0", port=port)
