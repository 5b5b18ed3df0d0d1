"""System information (``system_information.json``) document model."""

from __future__ import annotations

from pygbfs.models._base import GbfsBaseModel, GbfsFeed


class SystemInformation(GbfsBaseModel):
    """Operator and system details for the whole feed."""

    system_id: str | None = None
    language: str | None = None
    name: str | None = None
    short_name: str | None = None
    operator: str | None = None
    url: str | None = None
    purchase_url: str | None = None
    start_date: str | None = None
    phone_number: str | None = None
    email: str | None = None
    timezone: str | None = None
    license_url: str | None = None


class SystemInformationDocument(GbfsFeed):
    data: SystemInformation
