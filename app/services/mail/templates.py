"""HTML bodies for the four transactional emails.

Placeholders use ``{name}`` syntax and are filled by ``render_template``;
the inline CSS braces are never substituted.
"""

_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
  <div style="background: linear-gradient(to right, #10b981, #059669); padding: 20px; text-align: center;">
    <h1 style="color: white; margin: 0;">{heading}</h1>
  </div>
  <div style="background-color: #f9f9f9; padding: 20px; border-radius: 0 0 5px 5px; box-shadow: 0 2px 5px rgba(0,0,0,0.1);">
"""

_FOOT = """  </div>
  <div style="text-align: center; margin-top: 20px; color: #888; font-size: 0.8em;">
    <p>This is an automated message, please do not reply to this email.</p>
  </div>
</body>
</html>
"""


def _page(title: str, heading: str, content: str) -> str:
    return _HEAD.replace("{title}", title).replace("{heading}", heading) + content + _FOOT


VERIFICATION_EMAIL_TEMPLATE = _page(
    "Verify Your Email",
    "Verify Your Email",
    """    <p>Hello,</p>
    <p>Thank you for signing up! Your verification code is:</p>
    <div style="text-align: center; margin: 30px 0;">
      <span style="font-size: 32px; font-weight: bold; letter-spacing: 5px; color: #10b981;">{verificationCode}</span>
    </div>
    <p>Enter this code on the verification page to complete your registration.</p>
    <p>This code will expire in 24 hours for security reasons.</p>
    <p>If you didn't create an account with us, please ignore this email.</p>
""",
)

WELCOME_EMAIL_TEMPLATE = _page(
    "Welcome",
    "Welcome aboard!",
    """    <p>Hello <strong>{name}</strong>,</p>
    <p>Your email has been successfully verified and your account is now active.</p>
    <div style="text-align: center; margin: 30px 0;">
      <a href="{dashboardURL}" style="background-color: #10b981; color: white; padding: 12px 30px; text-decoration: none; border-radius: 5px; font-weight: bold; display: inline-block;">Go to Dashboard</a>
    </div>
    <p>If you have any questions, feel free to reach out to our support team.</p>
""",
)

PASSWORD_RESET_SUCCESS_TEMPLATE = _page(
    "Password Reset Successful",
    "Password Reset Successful",
    """    <p>Hello,</p>
    <p>We're writing to confirm that your password has been successfully reset.</p>
    <p>If you did not initiate this password reset, please contact our support team immediately.</p>
    <p>For security reasons, we recommend that you:</p>
    <ul>
      <li>Use a strong, unique password</li>
      <li>Avoid using the same password across multiple sites</li>
      <li>Never share your password with anyone</li>
    </ul>
""",
)

PASSWORD_RESET_REQUEST_TEMPLATE = _page(
    "Reset Your Password",
    "Password Reset Request",
    """    <p>Hello,</p>
    <p>We received a request to reset your password. If you didn't make this request, please ignore this email.</p>
    <p>To reset your password, click the button below:</p>
    <div style="text-align: center; margin: 30px 0;">
      <a href="{resetURL}" style="background-color: #10b981; color: white; padding: 12px 20px; text-decoration: none; border-radius: 5px; font-weight: bold;">Reset Password</a>
    </div>
    <p>Or copy and paste this link into your browser:</p>
    <p style="word-break: break-all; color: #10b981;">{resetURL}</p>
    <p>This link will expire in 1 hour for security reasons.</p>
""",
)


def render_template(template: str, **values: str) -> str:
    """Substitute ``{key}`` placeholders; unknown placeholders are left as is."""
    rendered = template
    for key, value in values.items():
        rendered = rendered.replace("{" + key + "}", value)
    return rendered
