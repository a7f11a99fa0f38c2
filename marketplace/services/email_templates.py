"""HTML templates for transactional email."""

from dataclasses import dataclass
from datetime import date, time
from html import escape

BRAND = "FreelancerWorks"

_FOOTER = (
    '<hr style="border: none; border-top: 1px solid #e5e7eb; margin: 20px 0;" />'
    f'<p style="color: #6b7280; font-size: 14px;">Best regards,<br>{BRAND} Team</p>'
)


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str


def _wrap(body: str) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; '
        'margin: 0 auto; padding: 20px;">'
        f"{body}{_FOOTER}</div>"
    )


def format_interview_date(value: date) -> str:
    """Format a date as e.g. 'Sunday, June 1, 2025'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def render_application_status(
    job_title: str,
    status: str,
    employer_name: str | None = None,
) -> RenderedEmail:
    """Render the application-status email for accepted, rejected or other."""
    title = escape(job_title)
    employer = escape(employer_name or "The employer")

    if status == "accepted":
        return RenderedEmail(
            subject=f'Congratulations! Your application for "{job_title}" has been accepted',
            html=_wrap(
                '<h1 style="color: #10b981;">Great News!</h1>'
                f"<p>Your application for <strong>\"{title}\"</strong> has been "
                '<strong style="color: #10b981;">accepted</strong>!</p>'
                f"<p>{employer} was impressed with your profile and would like to work with you.</p>"
                "<p>Log in to your dashboard to view the details and get started.</p>"
            ),
        )

    if status == "rejected":
        return RenderedEmail(
            subject=f'Application Update for "{job_title}"',
            html=_wrap(
                '<h1 style="color: #6b7280;">Application Update</h1>'
                f"<p>We wanted to let you know that your application for "
                f"<strong>\"{title}\"</strong> was not selected this time.</p>"
                f"<p>Don't be discouraged! There are many other opportunities waiting for you on {BRAND}.</p>"
                "<p>Keep applying and showcasing your skills, the right opportunity is out there!</p>"
            ),
        )

    return RenderedEmail(
        subject=f'Application Status Update for "{job_title}"',
        html=_wrap(
            "<h1>Application Update</h1>"
            f"<p>Your application status for <strong>\"{title}\"</strong> has been "
            f"updated to: <strong>{escape(status)}</strong></p>"
            "<p>Log in to your dashboard for more details.</p>"
        ),
    )


def render_interview(
    freelancer_name: str,
    job_title: str,
    employer_name: str | None,
    interview_date: date,
    interview_time: time,
    notes: str | None = None,
) -> RenderedEmail:
    """Render the interview-scheduled email."""
    notes_block = ""
    if notes:
        notes_block = (
            '<p style="margin: 16px 0 0 0; color: #374151;"><strong>Notes:</strong><br>'
            f'<span style="color: #6b7280;">{escape(notes)}</span></p>'
        )

    body = (
        '<h1 style="color: #059669;">Interview Scheduled!</h1>'
        f"<p>Hi {escape(freelancer_name)},</p>"
        f"<p>Great news! {escape(employer_name or 'The employer')} has scheduled an "
        f"interview with you for the position of <strong>{escape(job_title)}</strong>.</p>"
        '<div style="background: #f0fdf4; border: 1px solid #bbf7d0; '
        'border-radius: 8px; padding: 24px; margin-bottom: 24px;">'
        '<h2 style="color: #166534; margin: 0 0 16px 0; font-size: 18px;">Interview Details</h2>'
        f"<p><strong>Date:</strong> {format_interview_date(interview_date)}</p>"
        f"<p><strong>Time:</strong> {interview_time:%H:%M}</p>"
        f"{notes_block}</div>"
        '<p style="font-size: 14px; color: #6b7280;">Please make sure to be available '
        "at the scheduled time. If you need to reschedule, please contact the employer "
        "directly.</p>"
        "<p>Good luck with your interview!</p>"
    )
    return RenderedEmail(subject=f"Interview Scheduled for {job_title}", html=_wrap(body))


def render_contact(sender_name: str, sender_email: str, message: str) -> RenderedEmail:
    """Render a client-to-freelancer contact message."""
    escaped_message = escape(message).replace("\n", "<br>")
    body = (
        '<h1 style="color: #333; border-bottom: 2px solid #10b981; padding-bottom: 10px;">'
        f"New Message from {BRAND}</h1>"
        '<div style="background-color: #f9fafb; padding: 20px; border-radius: 8px; margin: 20px 0;">'
        f"<p><strong>From:</strong> {escape(sender_name)}</p>"
        f"<p><strong>Email:</strong> {escape(sender_email)}</p></div>"
        '<h2 style="color: #374151; font-size: 16px;">Message:</h2>'
        '<div style="padding: 20px; border: 1px solid #e5e7eb; border-radius: 8px; '
        f'line-height: 1.6;">{escaped_message}</div>'
        f'<p style="color: #6b7280; font-size: 14px;">This message was sent via {BRAND}. '
        "To reply, respond directly to this email or contact the sender at "
        f"{escape(sender_email)}.</p>"
    )
    return RenderedEmail(
        subject=f"New message from {sender_name} via {BRAND}", html=_wrap(body)
    )
