# =============================================================================
# core/payload.py  -  Registration Payload Assembly
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps the flat, validated tool parameters onto the nested body the
#   registration service expects:
#
#     admin   <- admin_id, organization_id, superadmin_id, associate_id
#     exam    <- exam_id, set_id
#     oem
#       header  <- logo, name, color{primary, background, cta,
#                                    cta_text_color, cta_text}
#       footer  <- copyright_text, test_name
#       links   <- backtodashboard, testlink, reportlink
#     user    <- username, emailid, contact_no
#     client_id, client_log (top level)
#
#   The function is total: a ValidatedRegistration always produces a
#   payload, so there is no error path here.
# =============================================================================

from core.models import (
    AdminGroup,
    ExamGroup,
    OemColor,
    OemFooter,
    OemGroup,
    OemHeader,
    OemLinks,
    RegistrationPayload,
    UserGroup,
)
from core.validation import ValidatedRegistration


def assemble_payload(reg: ValidatedRegistration) -> RegistrationPayload:
    """Build the nested RegistrationPayload from validated parameters."""
    return RegistrationPayload(
        admin=AdminGroup(
            admin_id=reg.admin_id,
            organization_id=reg.organization_id,
            superadmin_id=reg.superadmin_id,
            associate_id=reg.associate_id,
        ),
        exam=ExamGroup(
            exam_id=reg.exam_id,
            set_id=reg.set_id,
        ),
        oem=OemGroup(
            header=OemHeader(
                logo=reg.logo,
                name=reg.name,
                color=OemColor(
                    primary=reg.primary,
                    background=reg.background,
                    cta=reg.cta,
                    cta_text_color=reg.cta_text_color,
                    cta_text=reg.cta_text,
                ),
            ),
            footer=OemFooter(
                copyright_text=reg.copyright_text,
                test_name=reg.test_name,
            ),
            links=OemLinks(
                backtodashboard=reg.backtodashboard,
                testlink=reg.testlink,
                reportlink=reg.reportlink,
            ),
        ),
        user=UserGroup(
            username=reg.username,
            emailid=reg.emailid,
            contact_no=reg.contact_no,
        ),
        client_id=reg.client_id,
        client_log=reg.client_log,
    )
