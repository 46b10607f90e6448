from mamaalert.utils.enums import BadgeTier, RoadmapCategory as C

# (id, week, category, emoji, label); one task per week
EMERGENCY_ROADMAP = [
    ("1", 1, C.CONTACTS, "📇", "Save your partner or closest family member as an emergency contact"),
    ("2", 2, C.MEDICAL, "🩸", "Confirm and write down your blood group"),
    ("3", 3, C.HOSPITAL, "🏥", "Identify the nearest clinic that offers antenatal care"),
    ("4", 4, C.MEDICAL, "💊", "List the medications and supplements you currently take"),
    ("5", 5, C.CONTACTS, "📞", "Save your doctor's or midwife's phone number"),
    ("6", 6, C.MEDICAL, "⚠️", "Document any known allergies"),
    ("7", 7, C.TRANSPORT, "🚕", "Note two ways to get to the clinic at any time of day"),
    ("8", 8, C.MEDICAL, "🗂️", "Keep your antenatal card and test results in one folder"),
    ("9", 9, C.CONTACTS, "👥", "Identify a backup emergency contact"),
    ("10", 10, C.MEDICAL, "🧾", "Check that your health insurance details are accessible"),
    ("11", 11, C.HOSPITAL, "🗺️", "Find the nearest hospital with a maternity ward"),
    ("12", 12, C.MEDICAL, "📋", "Learn the danger signs that need urgent care"),
    ("13", 13, C.CONTACTS, "💬", "Share your due date and clinic with your emergency contacts"),
    ("14", 14, C.TRANSPORT, "🚗", "Save a trusted transport driver's number"),
    ("15", 15, C.HOSPITAL, "⏱️", "Time the route from home to the hospital"),
    ("16", 16, C.MEDICAL, "🩺", "Record any medical conditions your care team should know"),
    ("17", 17, C.CONTACTS, "🏠", "Arrange someone to look after your home or children in an emergency"),
    ("18", 18, C.HOSPITAL, "📝", "Register at your chosen hospital or birthing center"),
    ("19", 19, C.MEDICAL, "🧪", "Confirm your latest blood pressure and haemoglobin readings"),
    ("20", 20, C.TRANSPORT, "🔁", "Identify a backup transport option"),
    ("21", 21, C.CONTACTS, "🩸", "Find two possible blood donors with a compatible blood group"),
    ("22", 22, C.HOSPITAL, "🚪", "Find out which hospital entrance to use at night"),
    ("23", 23, C.MEDICAL, "📄", "Make copies of your ID and insurance card"),
    ("24", 24, C.HOSPITAL, "💵", "Set aside money for hospital and transport costs"),
    ("25", 25, C.CONTACTS, "🔔", "Agree on who to call first when labor starts"),
    ("26", 26, C.TRANSPORT, "⛽", "Make sure your transport has fuel or fare ready"),
    ("27", 27, C.MEDICAL, "👣", "Learn how to count your baby's movements"),
    ("28", 28, C.HOSPITAL, "🧭", "Visit the maternity ward ahead of time"),
    ("29", 29, C.CONTACTS, "📲", "Set up quick-dial for your emergency contacts"),
    ("30", 30, C.HOSPITAL, "🎒", "Start packing your hospital bag"),
    ("31", 31, C.MEDICAL, "🗒️", "Write your birth preferences and share them with your provider"),
    ("32", 32, C.TRANSPORT, "🌙", "Confirm night-time transport availability"),
    ("33", 33, C.HOSPITAL, "👶", "Pack baby clothes, wrappers and diapers"),
    ("34", 34, C.CONTACTS, "🤝", "Confirm your birth companion will be reachable"),
    ("35", 35, C.MEDICAL, "⏳", "Learn the signs of labor and when to go to the hospital"),
    ("36", 36, C.HOSPITAL, "✅", "Hospital bag packed and ready by the door"),
]

# Highest tier first
BADGE_THRESHOLDS = [
    (36, BadgeTier.GOLD),
    (24, BadgeTier.SILVER),
    (12, BadgeTier.BRONZE),
]

UPCOMING_LIMIT = 3
