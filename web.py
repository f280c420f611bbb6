# web.py

from flask import Flask, abort, jsonify, render_template_string, request
from config import LANGUAGE
from db import Session, Aquarium, aquarium_record, latest_parameters
from messages import language_of, render_status, t
from status import Severity
from utils.helpers import get_evaluator

app = Flask(__name__)

SEVERITY_COLORS = {
    Severity.NEUTRAL: "#ddd",
    Severity.UNDEFINED_RANGES: "#cde",
    Severity.STABLE: "#dfd",
    Severity.ALERT: "#fdd",
}

HTML = """
<!doctype html>
<title>{{ title }}</title>
<table border=1 cellpadding=6>
<tr><th>ID</th><th>Aquarium</th><th>Type</th><th>Status</th><th>{{ advice_title }}</th></tr>
{% for a in aquariums %}
<tr style="background:{{ a.color }}">
<td>{{ a.id }}</td><td>{{ a.name }}</td><td>{{ a.type }}</td>
<td>{{ a.summary }}</td>
<td>{% for rec in a.recommendations %}<p>{{ rec }}</p>{% endfor %}</td>
</tr>
{% endfor %}
</table>
"""

def _language():
    return language_of(request.args.get("lang", LANGUAGE))

def _status(session, aq, language):
    return get_evaluator(language).evaluate(aquarium_record(aq), latest_parameters(session, aq.id))

@app.route("/")
def index():
    language = _language()
    data = []
    with Session() as session:
        for aq in session.query(Aquarium).order_by(Aquarium.id).all():
            result = _status(session, aq, language)
            data.append(dict(
                id=aq.id, name=aq.name,
                type=t(f"subType.{aq.sub_type}", language) if aq.sub_type else "",
                color=SEVERITY_COLORS[result.severity],
                summary=render_status(result, language),
                recommendations=result.recommendations,
            ))
    return render_template_string(
        HTML, aquariums=data, title=t("bot.myAquariums", language), advice_title=t("advice.title", language)
    )

@app.route("/api/aquariums/<int:aquarium_id>/status")
def aquarium_status(aquarium_id):
    language = _language()
    with Session() as session:
        aq = session.get(Aquarium, aquarium_id)
        if aq is None:
            abort(404)
        result = _status(session, aq, language)
    payload = result.to_dict()
    payload["aquariumId"] = aquarium_id
    payload["summary"] = render_status(result, language)
    return jsonify(payload)
