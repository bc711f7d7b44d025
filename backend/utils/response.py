"""
response.py — Consistent JSON response helpers used across all routes.

Errors always carry a single human-readable message: {"error": "..."}
"""

from flask import jsonify


def success(data=None, status_code=200):
    return jsonify(data if data is not None else {}), status_code


def error(message="An error occurred", status_code=400):
    return jsonify({"error": message}), status_code


def bad_request(message):
    return error(message, status_code=400)


def server_error(message="An internal server error occurred."):
    return error(message, status_code=500)
