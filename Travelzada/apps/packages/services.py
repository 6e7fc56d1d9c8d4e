# apps/packages/services.py
import logging

from django.utils import timezone

from .models import Package
from .serializers import PackageSerializer
from .utils import normalize_package_id

logger = logging.getLogger(__name__)


def existing_package_ids():
    """Normalized IDs of every stored package."""
    return {
        normalize_package_id(value)
        for value in Package.objects.values_list("destination_id", flat=True)
    }


def _error_text(errors):
    if isinstance(errors, dict):
        parts = []
        for field, messages in errors.items():
            if isinstance(messages, (list, tuple)):
                messages = "; ".join(str(message) for message in messages)
            parts.append(f"{field}: {messages}")
        return ", ".join(parts)
    return str(errors)


def import_message(imported, skipped_ids, errors):
    message = f"Imported {imported} packages."
    if skipped_ids:
        message += f" Skipped {len(skipped_ids)} duplicates ({', '.join(skipped_ids)})."
    if errors:
        message += f" {len(errors)} errors."
    return message


def import_packages(items, created_by):
    """
    Creates packages from Excel rows or AI output.

    Items whose normalized ``Destination_ID`` is already stored, or repeated
    earlier in the same batch, are skipped. Every item is written on its own:
    a failing item is reported in ``errors`` and the ones already written
    stay in place.
    """
    existing = existing_package_ids()
    today = timezone.localdate().isoformat()

    imported = 0
    skipped_ids = []
    errors = []

    for item in items:
        pkg_id = str(item.get("Destination_ID") or "").strip()
        normalized = normalize_package_id(pkg_id)

        if normalized and normalized in existing:
            skipped_ids.append(pkg_id)
            continue

        try:
            data = {key: value for key, value in item.items() if not key.startswith("_")}
            data["Created_By"] = created_by
            data["Last_Updated"] = today

            serializer = PackageSerializer(data=data)
            if not serializer.is_valid():
                errors.append(f"{pkg_id or 'Unknown'}: {_error_text(serializer.errors)}")
                continue
            serializer.save()
        except Exception as e:
            logger.exception("Package %s could not be imported", pkg_id)
            errors.append(f"{pkg_id or 'Unknown'}: {e}")
            continue

        imported += 1
        existing.add(normalized)

    message = import_message(imported, skipped_ids, errors)
    logger.info("Package import by %s: %s", created_by, message)

    return {
        "imported": imported,
        "skipped": len(skipped_ids),
        "skipped_ids": skipped_ids,
        "errors": errors,
        "message": message,
    }


def bulk_import_json(payload, created_by="Bulk Import"):
    """
    Imports a JSON array of package objects.

    Raises ``ValueError`` when the payload is not a non-empty array; items
    missing their ID or name are reported and the rest are imported.
    """
    if not isinstance(payload, list):
        raise ValueError("JSON must be an array of package objects")
    if not payload:
        raise ValueError("JSON array is empty")

    valid = []
    invalid = []
    for index, item in enumerate(payload, start=1):
        if (
            not isinstance(item, dict)
            or not str(item.get("Destination_ID") or "").strip()
            or not str(item.get("Destination_Name") or "").strip()
        ):
            invalid.append(f"Package {index}: Missing required fields (Destination_ID or Destination_Name)")
            continue
        valid.append({**item, "Created_By": item.get("Created_By") or created_by})

    by_creator = {}
    for item in valid:
        by_creator.setdefault(item["Created_By"], []).append(item)

    imported = 0
    skipped_ids = []
    errors = list(invalid)
    for creator, items in by_creator.items():
        result = import_packages(items, creator)
        imported += result["imported"]
        skipped_ids.extend(result["skipped_ids"])
        errors.extend(result["errors"])

    return {
        "imported": imported,
        "skipped": len(skipped_ids),
        "skipped_ids": skipped_ids,
        "errors": errors,
        "message": import_message(imported, skipped_ids, errors),
    }


def packages_for_destination(destination, package_ids=()):
    """
    Packages shown for a destination.

    A package belongs to the destination when its ID is listed in
    ``package_ids``, when its name contains the destination (or the other
    way round), or when its ID or ID prefix equals the destination.
    """
    needle = (destination or "").strip().lower()
    listed = {normalize_package_id(value) for value in package_ids or []}

    matches = []
    for package in Package.objects.order_by("-last_updated", "-created_at"):
        name = package.destination_name.lower()
        pkg_id = package.destination_id.lower()
        if package.normalized_id in listed:
            matches.append(package)
        elif needle and (
            needle in name
            or (name and name in needle)
            or pkg_id == needle
            or package.destination_slug == needle
        ):
            matches.append(package)
    return matches
