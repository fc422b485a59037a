"""
Submission routes - public endpoint the landing page forms post to
"""
from fastapi import APIRouter, Request

router = APIRouter(tags=["Submissions"])

HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def save_submission(request: Request):
    """Handle one form post (any method; non-POST gets the 405 page)"""
    handler = request.app.state.submission_handler
    body = await request.body() if request.method == "POST" else None
    return await handler.handle(request.method, request.headers, body)


router.add_api_route("/api/save", save_submission, methods=HANDLED_METHODS, include_in_schema=False)
# Path the existing landing pages already post to
router.add_api_route("/.netlify/functions/save", save_submission, methods=HANDLED_METHODS, include_in_schema=False)
