from __future__ import annotations

from flask import Blueprint, jsonify

from ..game.spectrums import DEFAULT_SPECTRUMS

bp = Blueprint("spectrums", __name__)


@bp.get("/spectrums")
def get_spectrums():
    return jsonify({"spectrums": [{"left": s.left, "right": s.right} for s in DEFAULT_SPECTRUMS]})
