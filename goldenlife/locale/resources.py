"""Translation resources.

Nested by namespace; looked up with dotted keys such as "common.login".
Values may contain `{{name}}` placeholders.
"""

from typing import Any

RESOURCES: dict[str, dict[str, Any]] = {
    "en": {
        "common": {
            "search": "Search",
            "physiotherapists": "Physiotherapists",
            "nurses": "Home Nurses",
            "doctors": "Doctors",
            "dashboard": "Dashboard",
            "my_appointments": "My Appointments",
            "messages": "Messages",
            "notifications": "Notifications",
            "profile": "Profile",
            "settings": "Settings",
            "logout": "Logout",
            "login": "Login",
            "get_started": "Get Started",
            "first_name": "First Name",
            "last_name": "Last Name",
            "welcome_back": "Welcome back",
            "verification_required": "Verification required",
            "account_created": "Account created",
            "check_email_verify": "Check your email for a verification code.",
        },
        "auth": {
            "login_success": "You have signed in successfully.",
            "login_failed": "Login failed",
            "invalid_credentials": "Invalid email or password",
            "verify_success": "Your email has been verified. Please sign in.",
            "verify_failed": "Verification failed",
            "otp_resent": "Code sent",
            "otp_resend_failed": "Could not resend the code",
            "resend_code": "Resend code",
            "resend_cooldown": "Resend code in {{seconds}}s",
            "reset_code_sent": (
                "If an account exists with this email, you will receive "
                "a 6-digit reset code."
            ),
            "reset_success": "Your password has been reset. Please sign in.",
        },
    },
    "hu": {
        "common": {
            "search": "Keresés",
            "physiotherapists": "Fizioterapeuták",
            "nurses": "Házi ápolók",
            "doctors": "Orvosok",
            "dashboard": "Vezérlőpult",
            "my_appointments": "Saját időpontok",
            "messages": "Üzenetek",
            "notifications": "Értesítések",
            "profile": "Profil",
            "settings": "Beállítások",
            "logout": "Kijelentkezés",
            "login": "Bejelentkezés",
            "get_started": "Kezdés",
            "first_name": "Keresztnév",
            "last_name": "Vezetéknév",
            "welcome_back": "Üdv újra",
        },
        "auth": {
            "login_failed": "Sikertelen bejelentkezés",
            "invalid_credentials": "Hibás e-mail cím vagy jelszó",
            "resend_code": "Kód újraküldése",
            "resend_cooldown": "Újraküldés {{seconds}} mp múlva",
        },
    },
    "fa": {
        "common": {
            "search": "جستجو",
            "physiotherapists": "فیزیوتراپیست‌ها",
            "nurses": "پرستاران در منزل",
            "doctors": "پزشکان",
            "dashboard": "داشبورد",
            "my_appointments": "نوبت‌های من",
            "messages": "پیام‌ها",
            "notifications": "اعلان‌ها",
            "profile": "پروفایل",
            "settings": "تنظیمات",
            "logout": "خروج",
            "login": "ورود",
            "get_started": "شروع کنید",
            "first_name": "نام",
            "last_name": "نام خانوادگی",
        },
        "auth": {
            "login_failed": "ورود ناموفق بود",
            "invalid_credentials": "ایمیل یا رمز عبور نادرست است",
        },
    },
}
