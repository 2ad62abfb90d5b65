import logging
import os
from flask import Flask, jsonify, render_template, request
from flask_cors import CORS
from catalog import load_devices
from constants import DEVICE_LIST_URL, DEVICES_PATH, EXCLUDED_CATEGORY
from search import SEARCH_PLACEHOLDER, search_devices

app = Flask(__name__)
app.logger.setLevel(logging.INFO)
app.config.update(
    DEVICE_LIST_URL=DEVICE_LIST_URL,
    DEVICES_PATH=os.environ.get("DEVICES_PATH", DEVICES_PATH),
    EXCLUDED_CATEGORY=EXCLUDED_CATEGORY,
)
CORS(app)

# Read once per process; the catalog only changes when refresh_catalog.py runs.
DEVICES = load_devices(app.config["DEVICES_PATH"])
app.logger.info("Serving %d devices", len(DEVICES))


@app.route('/')
def home():
    return render_template('index.html', placeholder=SEARCH_PLACEHOLDER)


@app.route('/api/devices')
def devices():
    query = request.args.get("q", "")
    excluded = app.config["EXCLUDED_CATEGORY"]

    sections = search_devices(
        DEVICES,
        query,
        excluded_category=excluded,
        reference_url=app.config["DEVICE_LIST_URL"],
    )
    count = sum(len(section["items"]) for section in sections)

    return jsonify(
        {
            "query": query,
            "count": count,
            "placeholder": SEARCH_PLACEHOLDER,
            "sections": sections,
        }
    )


if __name__ == '__main__':
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port)
