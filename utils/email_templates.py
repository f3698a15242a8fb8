"""
HTML bodies for outbound pipeline emails.

Each builder returns an EmailContent (subject + html) ready for the
notification service. Values coming from users or the language model are
HTML-escaped.
"""

from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Optional

from config.settings import settings


@dataclass(frozen=True)
class EmailContent:
    subject: str
    html: str


def _paragraphs(text: str) -> str:
    return escape(text).replace("\n", "<br>")


def _layout(title: str, body: str) -> str:
    brand = escape(settings.EMAIL_FROM_NAME)
    return f"""
<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"></head>
<body style="font-family:Inter,Arial,sans-serif;color:#555555;background:#F8FBFF;margin:0;padding:0;">
  <div style="max-width:600px;margin:40px auto;background:white;border-radius:12px;overflow:hidden;">
    <div style="background:#0D1B3E;padding:32px;text-align:center;">
      <h1 style="color:white;font-size:24px;margin:0;">{escape(title)}</h1>
    </div>
    <div style="padding:40px;">
      {body}
    </div>
    <div style="background:#F8FBFF;padding:24px;text-align:center;font-size:12px;color:#999;">
      <p>{brand} &bull; <a href="{escape(settings.APP_URL)}">{escape(settings.APP_URL)}</a></p>
    </div>
  </div>
</body>
</html>"""


def _button(url: str, label: str) -> str:
    return (
        f'<p><a href="{escape(url)}" style="display:inline-block;background:#1A73E8;color:white;'
        f'padding:14px 28px;border-radius:8px;text-decoration:none;font-weight:600;">'
        f"{escape(label)}</a></p>"
    )


def rejection_email(job_title: str, company_name: str, email_body: str) -> EmailContent:
    """Wrap a generated rejection letter."""
    subject = f"Update on your application for {job_title}"
    body = f"<p>{_paragraphs(email_body)}</p>"
    return EmailContent(subject=subject, html=_layout(company_name, body))


def reference_request_email(
    referee_name: str,
    candidate_name: str,
    job_title: str,
    company_name: str,
    form_url: str,
) -> EmailContent:
    subject = f"Reference request for {candidate_name}"
    body = f"""
      <h2>Dear {escape(referee_name)},</h2>
      <p>{escape(candidate_name)} has applied for the position <strong>{escape(job_title)}</strong>
      at <strong>{escape(company_name)}</strong> and has listed you as a reference.</p>
      <p>We would appreciate it if you could take a few minutes to fill in a short reference form.
      It takes about 3-5 minutes and helps us assess the candidate fairly.</p>
      {_button(form_url, "Fill in reference form")}
      <p>Thank you for your time!</p>
    """
    return EmailContent(subject=subject, html=_layout("Reference request", body))


def offer_email(
    candidate_name: str,
    job_title: str,
    company_name: str,
    start_date: date,
    offer_url: str,
    salary: Optional[str] = None,
) -> EmailContent:
    salary_block = f"<p><strong>Salary:</strong> {escape(salary)}</p>" if salary else ""
    subject = f"Job offer: {job_title} at {company_name}"
    body = f"""
      <h2>Dear {escape(candidate_name)},</h2>
      <p>We are happy to let you know that {escape(company_name)} would like to offer you the position
      <strong>{escape(job_title)}</strong>!</p>
      <div style="background:#F0F7FF;border:2px solid #1A73E8;border-radius:12px;padding:24px;margin:24px 0;">
        <p><strong>Position:</strong> {escape(job_title)}</p>
        <p><strong>Company:</strong> {escape(company_name)}</p>
        <p><strong>Start date:</strong> {start_date.isoformat()}</p>
        {salary_block}
      </div>
      <p>Open the full offer to review and sign it:</p>
      {_button(offer_url, "View and sign offer")}
    """
    return EmailContent(subject=subject, html=_layout("Congratulations! You have a job offer", body))


def onboarding_email(company_name: str, job_title: str, email_body: str) -> EmailContent:
    """Wrap a generated welcome letter with next steps."""
    subject = f"Welcome to {company_name}!"
    body = f"""
      <p>{_paragraphs(email_body)}</p>
      <div style="background:#F0F7FF;border-radius:12px;padding:24px;margin:24px 0;">
        <h3>Next steps:</h3>
        <p>&#10003; You will receive more information from your manager</p>
        <p>&#10003; Bring identification on your first day</p>
        <p>&#10003; Contact us if you have any questions</p>
      </div>
      <p>We look forward to seeing you as our new {escape(job_title)}!</p>
    """
    return EmailContent(subject=subject, html=_layout("Welcome to the team!", body))


def offer_url(offer_id: str) -> str:
    return f"{settings.APP_URL.rstrip('/')}/offers/{offer_id}"


def reference_form_url(reference_id: str) -> str:
    return f"{settings.APP_URL.rstrip('/')}/reference/{reference_id}"
