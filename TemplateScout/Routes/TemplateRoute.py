"""
Flask REST API for Template Scout

Exposes template discovery over HTTP so a UI can trigger a run, inspect a
single repository, and read back the latest snapshot.

Endpoints:
    GET  /api/health-check - Health check
    POST /api/discover     - Run discovery and write the snapshot
    POST /api/analyze      - Analyze one repository
    GET  /api/templates    - Latest snapshot
    GET  /api/registry     - Snapshot grouped into categories
"""

import os
from dataclasses import replace
from flask import Flask, current_app, request, jsonify
from flask_cors import CORS

from TemplateScout.Utility.env import load_env_file
from TemplateScout.Utility.config import DiscoveryConfig
from TemplateScout.Exception.GitHubError import GitHubError
from TemplateScout.GitHub.GitHubClient import GitHubClient
from TemplateScout.Business.RepoAnalyzer import RepoAnalyzer
from TemplateScout.Business.DiscoveryBusiness import DiscoveryBusiness, read_snapshot, write_snapshot
from TemplateScout.Business.RegistryBuilder import build_registry
from TemplateScout.Routes.validators import validate_discover_payload, validate_analyze_payload

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional configuration dictionary; DISCOVERY_CONFIG overrides
            the environment-sourced DiscoveryConfig
    Returns:
        Flask application instance
"""
def CreateApp(config=None):

    app = Flask(__name__)
    # Load environment variables from .env
    load_env_file()
    app.config["DISCOVERY_CONFIG"] = DiscoveryConfig.from_env()
    if config:
        app.config.update(config)
    # Enable CORS for all routes
    CORS(app)
    RegisterRoutes(app)
    return app


def GitHubErrorResponse(e: GitHubError, target=None):
    logger.error(f"GitHub API error: {e.message}")
    if e.status_code == 401:
        return jsonify({
            "error": "unauthorized",
            "message": "Invalid GitHub token"
        }), 401
    elif e.status_code == 429:
        return jsonify({
            "error": "rate_limit",
            "message": "GitHub API rate limit exceeded"
        }), 429
    elif e.status_code == 404:
        return jsonify({
            "error": "not_found",
            "message": f"Repository not found: {target}"
        }), 404
    return jsonify({
        "error": "github_error",
        "message": e.message
    }), e.status_code if e.status_code >= 400 else 502


"""Register all API routes.
    Args:
        app: Flask application instance
"""
def RegisterRoutes(app: Flask) -> None:

    @app.route("/")
    def index():
        return "Template Scout is running!"

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "Template Scout API is running"
        }), 200

    """Run discovery and overwrite the snapshot file.
        Request JSON body (all optional, defaults from the environment):
        {
            "max_templates": 20,
            "min_stars": 100,
            "github_token": "ghp_..."
        }
    """
    @app.route('/api/discover', methods=['POST'])
    def DiscoverEndpoint():
        try:
            data = request.get_json(silent=True) or {}
            max_templates, min_stars, github_token = validate_discover_payload(data)
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        config = current_app.config["DISCOVERY_CONFIG"]
        overrides = {
            key: value for key, value in (
                ("max_templates", max_templates),
                ("min_stars", min_stars),
                ("github_token", github_token),
            ) if value is not None
        }
        config = replace(config, **overrides)

        try:
            logger.info("Discovery requested: max_templates=%d min_stars=%d", config.max_templates, config.min_stars)
            templates = DiscoveryBusiness(config).DiscoverTemplates()
            write_snapshot(templates, config.output_path)
            return jsonify({
                "success": True,
                "count": len(templates),
                "templates": [t.to_dict() for t in templates],
            }), 200
        except GitHubError as e:
            return GitHubErrorResponse(e)
        except Exception as e:
            logger.exception(f"Error discovering templates: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    """Analyze a single repository.
        Request JSON body:
        {
            "target": "owner/repo",      # Required, URL accepted
            "github_token": "ghp_..."    # Optional
        }
    """
    @app.route('/api/analyze', methods=['POST'])
    def AnalyzeEndpoint():
        data = request.get_json(silent=True) or {}
        try:
            target, github_token = validate_analyze_payload(data)
        except ValueError as e:
            return jsonify({"error": "invalid_parameter", "message": str(e)}), 400

        try:
            token = github_token or current_app.config["DISCOVERY_CONFIG"].github_token
            client = GitHubClient(token=token)
            summary = client.get_repo(target)
            result = RepoAnalyzer.inspect_repository(summary, client)
            return jsonify({"success": True, "target": target, **result.to_dict()}), 200
        except GitHubError as e:
            return GitHubErrorResponse(e, target)
        except Exception as e:
            logger.exception(f"Error analyzing repository: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    @app.route('/api/templates', methods=['GET'])
    def TemplatesEndpoint():
        path = current_app.config["DISCOVERY_CONFIG"].output_path
        if not os.path.exists(path):
            return jsonify({"error": "not_found", "message": "No snapshot yet. POST /api/discover first"}), 404
        try:
            return jsonify([t.to_dict() for t in read_snapshot(path)]), 200
        except Exception as e:
            logger.exception(f"Error reading snapshot {path}: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    @app.route('/api/registry', methods=['GET'])
    def RegistryEndpoint():
        path = current_app.config["DISCOVERY_CONFIG"].output_path
        if not os.path.exists(path):
            return jsonify({"error": "not_found", "message": "No snapshot yet. POST /api/discover first"}), 404
        try:
            return jsonify(build_registry(read_snapshot(path)).to_dict()), 200
        except Exception as e:
            logger.exception(f"Error building registry from {path}: {str(e)}")
            return jsonify({
                "error": "internal_error",
                "message": f"Internal server error: {str(e)}"
            }), 500

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /api/discover"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
