"""JSON API used by the operator to edit the site content."""
from __future__ import annotations

from fastapi import APIRouter, Body, HTTPException, Request

from landing.core.errors import ContentValidationError, RecordNotFoundError
from landing.routers import get_content_service

router = APIRouter(prefix="/api", tags=["content"])


def _invalid(exc: ContentValidationError) -> HTTPException:
    return HTTPException(422, {"error": "invalid", "field": exc.field, "message": exc.message})


def _with_id(payload: dict, item_id: str) -> dict:
    body = dict(payload)
    body["id"] = item_id
    return body


# -------------------------- profile --------------------------
@router.get("/profile")
def get_profile(request: Request):
    return get_content_service(request).get_user_data().to_dict()


@router.put("/profile")
def put_profile(request: Request, payload: dict = Body(...)):
    try:
        profile = get_content_service(request).update_user_data(payload)
    except ContentValidationError as exc:
        raise _invalid(exc)
    return profile.to_dict()


# -------------------------- products --------------------------
@router.get("/products")
def list_products(request: Request):
    return [p.to_dict() for p in get_content_service(request).get_products()]


@router.get("/products/{product_id}")
def get_product(request: Request, product_id: str):
    product = get_content_service(request).get_product_by_id(product_id)
    if product is None:
        raise HTTPException(404, "Product not found")
    return product.to_dict()


@router.post("/products", status_code=201)
def create_product(request: Request, payload: dict = Body(...)):
    try:
        product = get_content_service(request).add_product(payload)
    except ContentValidationError as exc:
        raise _invalid(exc)
    return product.to_dict()


@router.put("/products/{product_id}")
def update_product(request: Request, product_id: str, payload: dict = Body(...)):
    try:
        product = get_content_service(request).update_product(_with_id(payload, product_id))
    except ContentValidationError as exc:
        raise _invalid(exc)
    except RecordNotFoundError:
        raise HTTPException(404, "Product not found")
    return product.to_dict()


@router.delete("/products/{product_id}")
def delete_product(request: Request, product_id: str):
    if not get_content_service(request).remove_product(product_id):
        raise HTTPException(404, "Product not found")
    return {"ok": True}


# -------------------------- testimonials --------------------------
@router.get("/testimonials")
def list_testimonials(request: Request):
    return [t.to_dict() for t in get_content_service(request).get_testimonials()]


@router.get("/testimonials/{testimonial_id}")
def get_testimonial(request: Request, testimonial_id: str):
    testimonial = get_content_service(request).get_testimonial_by_id(testimonial_id)
    if testimonial is None:
        raise HTTPException(404, "Testimonial not found")
    return testimonial.to_dict()


@router.post("/testimonials", status_code=201)
def create_testimonial(request: Request, payload: dict = Body(...)):
    try:
        testimonial = get_content_service(request).add_testimonial(payload)
    except ContentValidationError as exc:
        raise _invalid(exc)
    return testimonial.to_dict()


@router.put("/testimonials/{testimonial_id}")
def update_testimonial(request: Request, testimonial_id: str, payload: dict = Body(...)):
    try:
        testimonial = get_content_service(request).update_testimonial(_with_id(payload, testimonial_id))
    except ContentValidationError as exc:
        raise _invalid(exc)
    except RecordNotFoundError:
        raise HTTPException(404, "Testimonial not found")
    return testimonial.to_dict()


@router.delete("/testimonials/{testimonial_id}")
def delete_testimonial(request: Request, testimonial_id: str):
    if not get_content_service(request).remove_testimonial(testimonial_id):
        raise HTTPException(404, "Testimonial not found")
    return {"ok": True}


# -------------------------- reset --------------------------
@router.post("/reset")
def reset(request: Request):
    source = get_content_service(request).reset_data()
    return {"ok": True, "source": source}
