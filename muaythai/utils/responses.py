from flask import jsonify


def success(data=None, message=None, status=200):
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return jsonify(body), status
