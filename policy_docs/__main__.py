import logging

from policy_docs.app_factory import create_app


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    app.logger.info("Server listening on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()

#############################
#
# Layout
# •	app_factory.py: composition root. Loads AppSettings, builds StorageLayout, converters,
#   PolicyService and PolicyRepository, registers the blueprint.
# •	config/: INI adapter returning a frozen AppSettings (APP_INI overrides the file location).
# •	domain/: dataclasses and the error taxonomy. No Flask, no filesystem code.
# •	services/: filename derivation (strategy), PDF/DOCX converters (strategy), PolicyService
#   (save pipeline: template -> pdf -> docx, first failure wins, no rollback).
# •	repositories/: StorageLayout (directories + paths + writes), PolicyRepository (PDF listing).
# •	web/: JSON endpoints only. POST /api/save-policy, GET /api/policies, GET /.
