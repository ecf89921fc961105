# wizard/constants.py
"""
Centralized constants for the voting planner wizard.
Dates, deadlines, outbound links and UI copy live here so the state machine,
resolver and render modules never hard-code them.
"""

from datetime import date, datetime, timedelta, timezone

# --- Election calendar (Thai time, UTC+7) ---
THAI_TZ = timezone(timedelta(hours=7), name="Asia/Bangkok")

MAIN_VOTING_DATE: date = date(2026, 2, 8)    # general election + referendum
EARLY_VOTING_DATE: date = date(2026, 2, 1)   # election only, no referendum
REFERENDUM_REGISTRATION_OPENS: date = date(2026, 1, 3)

# Last second of 5 Jan 2026, Thai time
REGISTRATION_DEADLINE: datetime = datetime(2026, 1, 5, 23, 59, 59, tzinfo=THAI_TZ)
COUNTDOWN_TICK_SECONDS: int = 1

# --- Outbound links (opened in a new tab, never called) ---
ELECTION_REGISTRATION_URL: str = "https://boraservices.bora.dopa.go.th/election/outvote/"
ELIGIBILITY_CHECK_URL: str = "https://stat.bora.dopa.go.th/Election/enqelectaliasaliasaliasaliaseligible/#/"
AUTHOR_URL: str = "https://x.com/PanJ"
ELIGIBILITY_PROMPT: str = "ไม่แน่ใจ?"
ELIGIBILITY_LINK_TEXT: str = "ตรวจสอบสิทธิ์ที่นี่"

# --- UI defaults ---
PAGE_TITLE: str = "จะไปเลือกตั้งและออกเสียงประชามติยังไงดี?"
PAGE_ICON: str = "🗳️"
CENTER_COLUMNS: list[int] = [1, 2, 1]  # left, center, right
WKEY: str = "vote_wizard"               # session-state key of the wizard state
DEFAULT_LOG_LEVEL: str = "INFO"

# --- Thai calendar ---
BUDDHIST_ERA_OFFSET: int = 543
THAI_MONTHS: tuple = (
    "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
    "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
)
THAI_MONTHS_SHORT: tuple = (
    "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
    "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
)
THAI_WEEKDAYS: tuple = ("จันทร์", "อังคาร", "พุธ", "พฤหัสบดี", "ศุกร์", "เสาร์", "อาทิตย์")

# --- Text/UI strings (keep here to avoid scattering copy) ---
SUBTITLE: str = "เลือกตั้งทั่วไป 2569 & ประชามติแก้รัฐธรรมนูญ"
Q_VOTING_PROVINCE: str = "คุณมีสิทธิเลือกตั้งอยู่ในจังหวัดใด?"
Q_FEB8_LOCATION: str = "ในวันที่ 8 กุมภาพันธ์ 2569 คุณจะอยู่ที่จังหวัดใด?"
Q_FEB1_LOCATION: str = "ในวันที่ 1 กุมภาพันธ์ 2569 คุณจะอยู่ที่จังหวัดใด?"
Q_FEB1_HINT: str = "วันเลือกตั้งล่วงหน้า/นอกเขต"

BACK_LABEL: str = "ย้อนกลับ"
RESET_LABEL: str = "เริ่มใหม่"
OR_LABEL: str = "หรือ"
OTHER_PROVINCE_LABEL: str = "อยู่จังหวัดอื่น"
SAME_AS_VOTING_HINT: str = "จังหวัดเดียวกับที่มีสิทธิเลือกตั้ง"
SAME_AS_FEB8_HINT: str = "จังหวัดเดียวกับที่จะอยู่วันที่ 8 ก.พ."

PICKER_PLACEHOLDER: str = "พิมพ์ค้นหาหรือเลือกจังหวัด"
PICKER_OTHER_PLACEHOLDER: str = "เลือกจังหวัดที่จะอยู่"
PICKER_NOT_FOUND: str = "ไม่พบจังหวัด"
PICKER_SHOW_ALL: str = "แสดงรายชื่อจังหวัด"
PICKER_CLOSE: str = "ปิดรายการ"

ELECTION_TITLE: str = "การเลือกตั้งทั่วไป"
ELECTION_EARLY_TITLE: str = "การเลือกตั้งทั่วไป (ล่วงหน้า/นอกเขต)"
REFERENDUM_TITLE: str = "การออกเสียงประชามติ"
REFERENDUM_OUTSIDE_TITLE: str = "การออกเสียงประชามติ (นอกเขต)"

RESULTS_TITLE: str = "สรุปสิ่งที่ต้องทำ"
RESULTS_HINT: str = "บันทึกหน้าจอนี้ไว้เพื่อไม่ลืม!"
RESULTS_PROVINCE_LABEL: str = "จังหวัดที่มีสิทธิเลือกตั้ง"
LOCATION_HIDDEN: str = "หน่วยเลือกตั้งล่วงหน้าในจังหวัดของคุณ"

TWO_BALLOTS_TITLE: str = "โปรดระวัง!"
TWO_BALLOTS_TEXT: str = (
    "คุณต้องเข้าคูหาสองรอบ เพื่อที่จะทำการลงคะแนนเสียงเลือกตั้ง "
    "และการลงคะแนนเสียงประชามติ"
)
EARLY_AT_HOME_TEXT: str = (
    "คุณจะเลือกตั้งล่วงหน้าในจังหวัดที่มีสิทธิเลือกตั้ง "
    "ให้ลงทะเบียนเลือกตั้งล่วงหน้าในเขตเลือกตั้งของคุณ"
)
EARLY_AT_HOME_SINGLE_TEXT: str = (
    "จังหวัดของคุณมีเขตเลือกตั้งเพียงเขตเดียว "
    "การเลือกตั้งล่วงหน้าภายในจังหวัดจึงเป็นการเลือกตั้งล่วงหน้าในเขตเลือกตั้ง "
    "ให้ลงทะเบียนเลือกตั้งล่วงหน้าในเขต และไปใช้สิทธิ ณ ที่เลือกตั้งกลางที่จังหวัดกำหนด "
    "ในวันที่ 1 กุมภาพันธ์ 2569"
)

ELECTION_REG_TITLE: str = "ลงทะเบียนเลือกตั้งล่วงหน้า/นอกเขต"
ELECTION_REG_TEXT: str = "ลงทะเบียนได้ถึงวันที่ 5 มกราคม 2569"
ELECTION_REG_BUTTON: str = "ลงทะเบียนที่นี่"
REFERENDUM_REG_TITLE: str = "ลงทะเบียนประชามตินอกเขต"
REFERENDUM_REG_TEXT: str = (
    "ลงทะเบียนได้ตั้งแต่วันเสาร์ที่ 3 มกราคม 2569 จนถึงวันจันทร์ที่ 5 มกราคม 2569"
)
REFERENDUM_REG_PENDING: str = "อยู่ระหว่างการรอช่องทางการลงทะเบียน"
REGISTRATION_EXPIRED: str = "หมดเวลาลงทะเบียนแล้ว"
REGISTRATION_REQUIRED: str = "ต้องลงทะเบียน"

IMPORTANT_DATES_TITLE: str = "วันสำคัญ"
IMPORTANT_DATES: tuple = (
    ("วันสุดท้ายของการลงทะเบียนเลือกตั้งล่วงหน้า/นอกเขต และการลงทะเบียนประชามตินอกเขต",
     REGISTRATION_DEADLINE.date()),
    ("วันเลือกตั้งล่วงหน้า/นอกเขต", EARLY_VOTING_DATE),
    ("วันเลือกตั้งทั่วไป & ประชามติ", MAIN_VOTING_DATE),
)

COUNTDOWN_UNITS: tuple = ("วัน", "ชม.", "นาที", "วินาที")

# --- Theme (election palette) ---
COLOR_PRIMARY: str = "#1e3a5f"
COLOR_SECONDARY: str = "#c9a227"
COLOR_ACCENT: str = "#e63946"
COLOR_DARK: str = "#14213d"

# --- CSS Styling ---
BASE_CSS: str = f"""
<style>
  .block-container {{ padding-top: 2rem !important; }}
  .vote-header {{ font-size: 34px; font-weight: 700; text-align: center; margin-bottom: 4px; }}
  .vote-subtitle {{ font-size: 19px; color: {COLOR_SECONDARY}; text-align: center; margin-bottom: 18px; }}
  .vote-question {{ font-size: 24px; font-weight: 600; margin: 8px 0 14px; }}
  .vote-hint {{ font-size: 15px; color: #666; margin: -6px 0 12px; }}
  .vote-or {{ text-align: center; color: #888; margin: 10px 0; }}
  .vote-dots {{ display: flex; justify-content: center; gap: 8px; margin-bottom: 18px; }}
  .vote-dot {{ width: 12px; height: 12px; border-radius: 50%; background: #d0d4dc; }}
  .vote-dot.past {{ background: {COLOR_SECONDARY}99; }}
  .vote-dot.active {{ background: {COLOR_SECONDARY}; transform: scale(1.25); }}
  .vote-card {{ border: 1px solid #e3e6ec; border-radius: 16px; padding: 16px 18px; margin-bottom: 12px; }}
  .vote-card h4 {{ margin: 0 0 6px; }}
  .vote-summary {{ border: 1px solid {COLOR_SECONDARY}55; border-radius: 16px; padding: 14px 18px; margin-bottom: 14px; }}
  .vote-reg {{ margin-top: 10px; padding: 10px 14px; border-radius: 12px; background: {COLOR_ACCENT}; color: #fff; font-weight: 600; }}
  .vote-countdown {{ display: flex; gap: 8px; margin: 8px 0; }}
  .vote-countdown div {{ background: {COLOR_DARK}; color: #fff; border-radius: 8px; padding: 4px 8px; min-width: 56px; text-align: center; font-family: monospace; }}
  .vote-expired {{ color: {COLOR_ACCENT}; font-weight: 600; }}
  .vote-footer {{ text-align: center; color: #999; font-size: 13px; margin-top: 24px; }}
</style>
"""
