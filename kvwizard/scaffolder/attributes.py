"""Template attribute map construction."""

from __future__ import annotations

from kvwizard.version_client import VersionData

from .models import ProjectIdentity

ARTIFACT_ID = "artifactId"
GROUP_ID = "groupId"
PACKAGE_NAME = "packageName"


def build_attributes(identity: ProjectIdentity, versions: VersionData) -> dict[str, str]:
    """Build the ``${key}`` substitution map for one generation run.

    Every framework version gets its own key so a single map serves all
    project types.
    """
    return {
        ARTIFACT_ID: identity.artifact_id,
        GROUP_ID: identity.group_id,
        PACKAGE_NAME: identity.package_name,
        "kotlin_version": versions.kotlin,
        "ktor_version": versions.template_ktor.ktor,
        "serialization_version": versions.serialization,
        "kvision_version": versions.kvision,
        "coroutines_version": versions.coroutines,
        "jooby_version": versions.template_jooby.jooby,
        "micronaut_version": versions.template_micronaut.micronaut,
        "spring_boot_version": versions.template_spring.spring_boot,
        "spring_datar2dbc_version": versions.template_spring.spring_data_r2dbc,
        "r2dbc_postgres_version": versions.template_spring.r2dbc_postgres,
        "r2dbc_h2_version": versions.template_spring.r2dbc_h2,
        "vertx_version": versions.template_vertx.vertx_plugin,
    }
