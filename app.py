# app.py
import random

from flask import Flask, render_template, request, jsonify

import responses
from chatbot import Responder, set_default_responder
from config import get_config
from logger import logger, set_level


def create_app(responder=None, config=None):
    config = config or get_config()
    set_level(config.log_level)
    if responder is None:
        responder = Responder(rng=random.Random(config.random_seed), fact_match=config.fact_match)
        # think() answers from the same facts as /ask
        set_default_responder(responder)

    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config['THINKBOT'] = config
    app.extensions['responder'] = responder

    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/ask', methods=['POST'])
    def ask():
        data = request.get_json(silent=True) or {}
        message = data.get('message') if isinstance(data, dict) else None
        if not isinstance(message, str) or not message.strip():
            logger.info("Rejected empty message from %s", request.remote_addr)
            return jsonify({'reply': responses.EMPTY_MESSAGE}), 400
        reply = responder.respond(message)
        return jsonify({'reply': reply})

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok', 'facts': len(responder.knowledge)})

    logger.info("thinkbot ready (fact match: %s, %d facts)", responder.fact_match, len(responder.knowledge))
    return app


app = create_app()

if __name__ == '__main__':
    cfg = app.config['THINKBOT']
    app.run(host=cfg.host, port=cfg.port, debug=cfg.debug)
