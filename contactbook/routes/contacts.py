"""
Contactbook — Contact Page Route Handlers
==========================================

What:  Server-rendered HTML pages for listing, creating, viewing, editing and
       deleting contacts.
How:   Each handler reads the path/form, calls ContactService, and picks the
       response: rendered page, 303 redirect, or (through the global exception
       handlers) a plain-text error status.

Route Inventory (mounted at /contacts):
    GET  /                  list
    GET  /new               new-form
    POST /                  create
    GET  /{id}              show
    GET  /{id}/edit         edit-form
    POST /{id}              update
    POST /{id}/delete       delete
    GET  /generated/{id}    generated-show (alias of show)

Error responses (handled by global exception handlers):
    HTTP 404: NotFoundError
    HTTP 500: ContactOperationError, DatabaseError, anything unexpected
Validation failures never leave this module: the form is re-rendered.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from contactbook.exceptions import ValidationError
from contactbook.schemas.contact import ContactForm
from contactbook.services.contact_service import ContactService, get_contact_service
from contactbook.templating import render_template

logger = logging.getLogger(__name__)

CONTACTS_PREFIX = "/contacts"

router = APIRouter(prefix=CONTACTS_PREFIX, tags=["Contacts"])


async def read_contact_form(request: Request) -> ContactForm:
    """Parse the urlencoded/multipart body into the explicit form model."""
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    return ContactForm.model_validate(fields)


def _redirect(path: str) -> RedirectResponse:
    # 303 makes the browser follow a POST with a GET
    return RedirectResponse(url=path, status_code=303)


@router.get("/", response_class=HTMLResponse, summary="List all contacts")
async def list_contacts(
    request: Request,
    service: ContactService = Depends(get_contact_service),
):
    contacts = await service.list_contacts()
    return render_template(request, "contacts/index.html", {"contacts": contacts})


@router.get("/new", response_class=HTMLResponse, summary="Render the creation form")
async def new_contact_form(request: Request):
    return render_template(request, "contacts/new.html")


@router.post("/", summary="Create a contact")
async def create_contact(
    request: Request,
    form: ContactForm = Depends(read_contact_form),
    service: ContactService = Depends(get_contact_service),
):
    """
    Validate → sanitize → repository create → redirect to the list.

    Missing names re-render the creation form (200) with the inline message
    and the submitted values; the repository is not called.
    """
    data = form.to_form_data()
    try:
        await service.create_contact(data)
    except ValidationError as exc:
        logger.info("Create rejected: %s", exc.message)
        return render_template(
            request,
            "contacts/new.html",
            {"error_message": exc.message, "contact": service.draft_contact(data)},
        )

    return _redirect(f"{CONTACTS_PREFIX}/")


@router.get("/{contact_id}", response_class=HTMLResponse, summary="Show a contact")
async def show_contact(
    request: Request,
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    contact = await service.get_contact(contact_id)
    return render_template(request, "contacts/show.html", {"contact": contact})


@router.get("/{contact_id}/edit", response_class=HTMLResponse, summary="Render the edit form")
async def edit_contact_form(
    request: Request,
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    contact = await service.get_contact(contact_id)
    return render_template(request, "contacts/edit.html", {"contact": contact})


@router.post("/{contact_id}", summary="Update a contact")
async def update_contact(
    request: Request,
    contact_id: str,
    form: ContactForm = Depends(read_contact_form),
    service: ContactService = Depends(get_contact_service),
):
    """
    Validate → sanitize → repository update (id forced from the URL) →
    redirect to the detail page.
    """
    data = form.to_form_data()
    try:
        await service.update_contact(contact_id, data)
    except ValidationError as exc:
        logger.info("Update of %s rejected: %s", contact_id, exc.message)
        return render_template(
            request,
            "contacts/edit.html",
            {
                "error_message": exc.message,
                "contact": service.draft_contact(data, contact_id=contact_id),
            },
        )

    return _redirect(f"{CONTACTS_PREFIX}/{contact_id}")


@router.post("/{contact_id}/delete", summary="Delete a contact")
async def delete_contact(
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    await service.delete_contact(contact_id)
    return _redirect(f"{CONTACTS_PREFIX}/")


@router.get(
    "/generated/{contact_id}",
    response_class=HTMLResponse,
    summary="Show a contact through its generated link",
)
async def show_generated_contact(
    request: Request,
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    contact = await service.get_contact(contact_id, resource="Generated Contact")
    return render_template(request, "contacts/show.html", {"contact": contact})
