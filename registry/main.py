"""
Entry point for the people GraphQL server.

``create_app`` builds the FastAPI application: it checks the schema
document against the served schema, creates the person store and binds
two routes, the GraphQL endpoint and the GraphiQL page at ``/``. The
module-level ``app`` lets an ASGI server pick it up directly::

    uvicorn registry.main:app --port 8080
"""

import logging
import typing as t
from datetime import datetime
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.responses import HTMLResponse
from strawberry.fastapi import GraphQLRouter

from registry.core.config import Settings, settings
from registry.core.logging_config import setup_logging
from registry.db.store import PersonStore
from registry.graphql.document import verify_schema_document
from registry.graphql.schema import build_schema
from registry.util.time import utc_now


logger = logging.getLogger(__name__)


def create_app(
    config: Settings = settings,
    store: t.Optional[PersonStore] = None,
    clock: t.Callable[[], datetime] = utc_now,
  ) -> FastAPI:
  setup_logging(config.log_level, config.log_file or None)

  schema = build_schema(debug=config.debug)

  # A missing or stale schema document stops the server from starting.
  verify_schema_document(config.schema_file, schema)

  if store is None:
    store = PersonStore.seeded() if config.seed_people else PersonStore()

  def get_context() -> t.Dict[str, t.Any]:
    return {"store": store, "clock": clock}

  graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if config.debug else None,
  )

  app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
  app.include_router(graphql_app, prefix=config.graphql_path)
  app.state.store = store

  @app.get("/", response_class=HTMLResponse)
  def graphiql_page() -> str:
    try:
      page = Path(config.graphiql_page).read_text(encoding="utf-8")
    except OSError as e:
      logger.error("Cannot read GraphiQL page '%s': %s", config.graphiql_page, e)
      raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="GraphiQL page not available")

    return page.replace("__GRAPHQL_PATH__", config.graphql_path)

  logger.info("Serving GraphQL at %s with %d people", config.graphql_path, len(store))

  return app


app = create_app()


def main() -> None:
  logger.info("Listening at http://%s:%d", settings.host, settings.port)
  uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
  main()
