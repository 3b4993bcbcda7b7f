"""Reference data loaded by the ``flask seed`` commands."""

# Official list of Thailand's 77 provinces, in the order they are seeded.
THAILAND_PROVINCES = [
    ("กรุงเทพมหานคร", "Bangkok"),
    ("กระบี่", "Krabi"),
    ("กาญจนบุรี", "Kanchanaburi"),
    ("กาฬสินธุ์", "Kalasin"),
    ("กำแพงเพชร", "Kamphaeng Phet"),
    ("ขอนแก่น", "Khon Kaen"),
    ("จันทบุรี", "Chanthaburi"),
    ("ฉะเชิงเทรา", "Chachoengsao"),
    ("ชัยนาท", "Chai Nat"),
    ("ชัยภูมิ", "Chaiyaphum"),
    ("ชุมพร", "Chumphon"),
    ("เชียงราย", "Chiang Rai"),
    ("เชียงใหม่", "Chiang Mai"),
    ("ตรัง", "Trang"),
    ("ตราด", "Trat"),
    ("ตาก", "Tak"),
    ("นครนายก", "Nakhon Nayok"),
    ("นครปฐม", "Nakhon Pathom"),
    ("นครพนม", "Nakhon Phanom"),
    ("นครราชสีมา", "Nakhon Ratchasima"),
    ("นครศรีธรรมราช", "Nakhon Si Thammarat"),
    ("นครสวรรค์", "Nakhon Sawan"),
    ("นนทบุรี", "Nonthaburi"),
    ("นราธิวาส", "Narathiwat"),
    ("น่าน", "Nan"),
    ("บึงกาฬ", "Bueng Kan"),
    ("บุรีรัมย์", "Buriram"),
    ("ปทุมธานี", "Pathum Thani"),
    ("ประจวบคีรีขันธ์", "Prachuap Khiri Khan"),
    ("ปราจีนบุรี", "Prachin Buri"),
    ("ปัตตานี", "Pattani"),
    ("พระนครศรีอยุธยา", "Phra Nakhon Si Ayutthaya"),
    ("พะเยา", "Phayao"),
    ("พังงา", "Phang Nga"),
    ("พัทลุง", "Phatthalung"),
    ("พิจิตร", "Phichit"),
    ("พิษณุโลก", "Phitsanulok"),
    ("เพชรบุรี", "Phetchaburi"),
    ("เพชรบูรณ์", "Phetchabun"),
    ("แพร่", "Phrae"),
    ("ภูเก็ต", "Phuket"),
    ("มหาสารคาม", "Maha Sarakham"),
    ("มุกดาหาร", "Mukdahan"),
    ("แม่ฮ่องสอน", "Mae Hong Son"),
    ("ยะลา", "Yala"),
    ("ยโสธร", "Yasothon"),
    ("ระนอง", "Ranong"),
    ("ระยอง", "Rayong"),
    ("ราชบุรี", "Ratchaburi"),
    ("ร้อยเอ็ด", "Roi Et"),
    ("ลพบุรี", "Lopburi"),
    ("ลำปาง", "Lampang"),
    ("ลำพูน", "Lamphun"),
    ("เลย", "Loei"),
    ("ศรีสะเกษ", "Sisaket"),
    ("สกลนคร", "Sakon Nakhon"),
    ("สงขลา", "Songkhla"),
    ("สตูล", "Satun"),
    ("สมุทรปราการ", "Samut Prakan"),
    ("สมุทรสงคราม", "Samut Songkhram"),
    ("สมุทรสาคร", "Samut Sakhon"),
    ("สระแก้ว", "Sa Kaeo"),
    ("สระบุรี", "Saraburi"),
    ("สิงห์บุรี", "Sing Buri"),
    ("สุโขทัย", "Sukhothai"),
    ("สุพรรณบุรี", "Suphan Buri"),
    ("สุราษฎร์ธานี", "Surat Thani"),
    ("สุรินทร์", "Surin"),
    ("หนองคาย", "Nong Khai"),
    ("หนองบัวลำภู", "Nong Bua Lam Phu"),
    ("อ่างทอง", "Ang Thong"),
    ("อำนาจเจริญ", "Amnat Charoen"),
    ("อุดรธานี", "Udon Thani"),
    ("อุตรดิตถ์", "Uttaradit"),
    ("อุทัยธานี", "Uthai Thani"),
    ("อุบลราชธานี", "Ubon Ratchathani"),
    ("ชลบุรี", "Chon Buri"),
]

PRODUCTION_TAGS = [
    ("เหมาะสำหรับผู้เริ่มต้น", "Beginner Friendly"),
    ("สำหรับมือโปร", "For Professionals"),
    ("บรรยากาศดี", "Good Atmosphere"),
    ("อุปกรณ์ครบครัน", "Fully Equipped"),
    ("สอนภาษาอังกฤษ", "English Speaking"),
]

BASE_CLASSES = [
    {
        "name_th": "มวยไทยพื้นฐาน",
        "name_en": "Basic Muay Thai",
        "description_th": "เรียนรู้พื้นฐานมวยไทย",
        "description_en": "Learn the basics of Muay Thai",
    },
    {
        "name_th": "มวยไทยขั้นสูง",
        "name_en": "Advanced Muay Thai",
        "description_th": "สำหรับผู้มีประสบการณ์",
        "description_en": "For experienced practitioners",
    },
    {
        "name_th": "คาร์ดิโอ มวยไทย",
        "name_en": "Cardio Muay Thai",
        "description_th": "มวยไทยเพื่อการออกกำลังกาย",
        "description_en": "Muay Thai for fitness",
    },
]

# ================================
# Development mock data
# ================================
MOCK_IMAGES = [
    "https://via.placeholder.com/800x600.png/000000/FFFFFF?text=Muay+Thai+1",
    "https://via.placeholder.com/800x600.png/FF0000/FFFFFF?text=Muay+Thai+2",
    "https://via.placeholder.com/800x600.png/0000FF/FFFFFF?text=Muay+Thai+3",
]

MOCK_GYM_NAMES = [
    ("ไทเกอร์มวยไทย", "Tiger Muay Thai"),
    ("มาสเตอร์ทอดดี้ยิม", "Master Toddy's"),
    ("พีเคแสนชัยมวยไทยยิม", "PK Saenchai Gym"),
    ("บัญชาเมฆยิม", "Banchamek Gym"),
    ("แฟร์เท็กซ์", "Fairtex Center"),
]

MOCK_FIRST_NAMES = [
    ("สมบัติ", "Sombat"),
    ("ประเสริฐ", "Prasert"),
    ("วิชัย", "Wichai"),
    ("สามารถ", "Samart"),
    ("เขาทราย", "Khaosai"),
]

MOCK_LAST_NAMES = [
    ("บัญชาเมฆ", "Banchamek"),
    ("พยัคฆ์อรุณ", "Payakaroon"),
    ("แกแล็คซี่", "Galaxy"),
    ("ศิษย์ยอดธง", "Sityodtong"),
    ("ทอดดี้", "Toddy"),
]
