from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from fastapi import APIRouter, Body, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.engine import ResourceEngine
from app.db.session import get_db


def register_crud_routes(
    router: APIRouter,
    engine: ResourceEngine,
    resource: str,
    *,
    toggle_path: Optional[str] = "/{item_id}/toggle-status",
    flag_path: Optional[str] = None,
    flag_message: Optional[str] = None,
    bulk_key: Optional[str] = None,
    include_create: bool = True,
    update_methods: Sequence[str] = ("PUT",),
    list_conditions: Optional[Callable[[Mapping[str, Any]], List[Any]]] = None,
) -> APIRouter:
    """
    Attach the canonical routes of a resource to `router`.

    Resource-specific routes must be added to the router before calling this, so that
    static paths (e.g. /current/active) win over /{item_id}. list_conditions turns query
    parameters the schema filters do not cover into extra WHERE clauses.
    """
    schema = engine.schema
    name, plural = schema.name, schema.label_plural

    @router.get("", name=f"{resource}:list")
    async def list_items(
        request: Request,
        include_inactive: bool = Query(False, alias="includeInactive"),
        page: Optional[int] = Query(None, ge=1),
        limit: Optional[int] = Query(None, ge=1),
        db: AsyncSession = Depends(get_db),
    ):
        conditions = list_conditions(request.query_params) if list_conditions else ()
        items, pagination = await engine.list(
            db,
            request.query_params,
            include_inactive=include_inactive,
            page=page,
            limit=limit,
            conditions=conditions,
        )
        data = await engine.serialize_many(db, items)
        return ok(data, f"{plural} fetched successfully", pagination=pagination)

    if bulk_key is not None:

        @router.post(
            "/bulk",
            name=f"{resource}:bulk",
            dependencies=[Depends(check_permission(resource, "create"))],
        )
        async def bulk_create(payload: Any = Body(...), db: AsyncSession = Depends(get_db)):
            entries = payload.get(bulk_key) if isinstance(payload, dict) else payload
            objs = await engine.bulk_create(db, entries)
            data = await engine.serialize_many(db, objs)
            return ok(data, f"{len(objs)} {plural.lower()} created successfully", status_code=status.HTTP_201_CREATED)

    @router.get("/{item_id}", name=f"{resource}:get")
    async def get_item(item_id: str, db: AsyncSession = Depends(get_db)):
        obj = await engine.get(db, item_id)
        return ok(await engine.serialize(db, obj), f"{name} fetched successfully")

    if include_create:

        @router.post(
            "",
            name=f"{resource}:create",
            dependencies=[Depends(check_permission(resource, "create"))],
        )
        async def create_item(payload: Dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
            obj = await engine.create(db, payload)
            return ok(
                await engine.serialize(db, obj), f"{name} created successfully", status_code=status.HTTP_201_CREATED
            )

    @router.api_route(
        "/{item_id}",
        methods=list(update_methods),
        name=f"{resource}:update",
        dependencies=[Depends(check_permission(resource, "update"))],
    )
    async def update_item(item_id: str, payload: Dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
        obj = await engine.update(db, item_id, payload)
        return ok(await engine.serialize(db, obj), f"{name} updated successfully")

    @router.delete(
        "/{item_id}",
        name=f"{resource}:delete",
        dependencies=[Depends(check_permission(resource, "delete"))],
    )
    async def delete_item(item_id: str, db: AsyncSession = Depends(get_db)):
        await engine.delete(db, item_id)
        return ok(message=f"{name} deleted successfully")

    if toggle_path is not None and schema.has_status:

        @router.patch(
            toggle_path,
            name=f"{resource}:toggle",
            dependencies=[Depends(check_permission(resource, "update"))],
        )
        async def toggle_item(item_id: str, db: AsyncSession = Depends(get_db)):
            is_active = await engine.toggle_status(db, item_id)
            state = "activated" if is_active else "deactivated"
            return ok({"isActive": is_active}, f"{name} {state} successfully")

    if flag_path is not None and schema.singleton is not None:

        @router.patch(
            flag_path,
            name=f"{resource}:flag",
            dependencies=[Depends(check_permission(resource, "update"))],
        )
        async def flag_item(item_id: str, db: AsyncSession = Depends(get_db)):
            obj = await engine.set_flag(db, item_id)
            return ok(await engine.serialize(db, obj), flag_message or f"{name} set as default successfully")

    return router
