# Services package.
#
# Each module encapsulates business logic and database access for a single
# domain aggregate:
#
#   content_service  — CRUD + category-name uniqueness + slug derivation for Content
#
# Services receive an AsyncSession at construction so that the router layer
# controls the transaction boundary via the ``get_db`` dependency.
