"""Nodes API — one function, many endpoints.

The host declares the function with a trailing ``{*path}`` wildcard and
hands every invocation to ``main``. Routes cover listing, per-node detail,
and a nested access check with two path parameters.

Try it from the shell:
    switchyard routes app:router
    switchyard call app:router GET nodes/alpha
"""

from switchyard import RequestContext, Response, Router

NODES = {
    "alpha": {"users": {"ada", "grace"}},
    "beta": {"users": {"linus"}},
}

router = Router()


@router.get("/")
async def index(request, params):
    return Response(body={"service": "nodes"})


@router.get("/nodes")
async def list_nodes(request, params):
    return Response(body=sorted(NODES))


@router.get("/nodes/(nodeId)")
async def get_node(request, params):
    node = NODES.get(params["nodeId"])
    if node is None:
        return Response(status=404, body={"error": "unknown node"})
    return Response(body={"id": params["nodeId"], "users": sorted(node["users"])})


@router.post("/nodes/(nodeId)/users/(userId)/access")
async def check_access(request, params):
    node = NODES.get(params["nodeId"], {"users": set()})
    allowed = params["userId"] in node["users"]
    return (
        Response(status=200 if allowed else 403)
        .with_header("Content-Type", "application/json")
        .with_body({"allowed": allowed})
    )


async def main(method: str, binding_data: dict) -> dict:
    """Host entry point: binding data in, response envelope out."""
    request = RequestContext.from_binding_data(method, binding_data)
    response = await router.route(request)
    return response.to_dict()
