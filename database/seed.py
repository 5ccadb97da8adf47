import copy

# ✅ 최초 실행 시 database.json 으로 기록되는 기본 데이터 (교사 1명 + 학생 12명)
SEED_DOCUMENT = {
    "teacher": {
        "email": "teacher@school.com",
        "password": "teacher123",
        "name": "John Smith",
        "image": "https://reqres.in/img/faces/1-image.jpg",
        "id": "teacher-001",
    },
    "students": [
        {
            "id": "stu-001",
            "firstName": "Emma",
            "lastName": "Johnson",
            "email": "emma.johnson@email.com",
            "age": 20,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/2-image.jpg",
            "courses": ["Mathematics", "Physics", "Computer Science"],
        },
        {
            "id": "stu-002",
            "firstName": "Liam",
            "lastName": "Williams",
            "email": "liam.williams@email.com",
            "age": 19,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/3-image.jpg",
            "courses": ["English Literature", "History", "Philosophy"],
        },
        {
            "id": "stu-003",
            "firstName": "Olivia",
            "lastName": "Brown",
            "email": "olivia.brown@email.com",
            "age": 21,
            "enrollmentDate": "2022-09-01",
            "image": "https://reqres.in/img/faces/4-image.jpg",
            "courses": ["Biology", "Chemistry", "Environmental Science"],
        },
        {
            "id": "stu-004",
            "firstName": "Noah",
            "lastName": "Davis",
            "email": "noah.davis@email.com",
            "age": 20,
            "enrollmentDate": "2023-01-15",
            "image": "https://reqres.in/img/faces/5-image.jpg",
            "courses": ["Economics", "Business Management", "Statistics"],
        },
        {
            "id": "stu-005",
            "firstName": "Ava",
            "lastName": "Martinez",
            "email": "ava.martinez@email.com",
            "age": 19,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/6-image.jpg",
            "courses": ["Art History", "Studio Art", "Design"],
        },
        {
            "id": "stu-006",
            "firstName": "Ethan",
            "lastName": "Garcia",
            "email": "ethan.garcia@email.com",
            "age": 22,
            "enrollmentDate": "2022-01-10",
            "image": "https://reqres.in/img/faces/7-image.jpg",
            "courses": ["Computer Science", "Mathematics", "Data Science"],
        },
        {
            "id": "stu-007",
            "firstName": "Sophia",
            "lastName": "Rodriguez",
            "email": "sophia.rodriguez@email.com",
            "age": 20,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/8-image.jpg",
            "courses": ["Psychology", "Sociology", "Communications"],
        },
        {
            "id": "stu-008",
            "firstName": "Mason",
            "lastName": "Wilson",
            "email": "mason.wilson@email.com",
            "age": 21,
            "enrollmentDate": "2022-09-01",
            "image": "https://reqres.in/img/faces/9-image.jpg",
            "courses": ["Mechanical Engineering", "Physics", "Mathematics"],
        },
        {
            "id": "stu-009",
            "firstName": "Isabella",
            "lastName": "Anderson",
            "email": "isabella.anderson@email.com",
            "age": 19,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/10-image.jpg",
            "courses": ["Political Science", "International Relations", "Law"],
        },
        {
            "id": "stu-010",
            "firstName": "James",
            "lastName": "Thomas",
            "email": "james.thomas@email.com",
            "age": 20,
            "enrollmentDate": "2023-01-15",
            "image": "https://reqres.in/img/faces/11-image.jpg",
            "courses": ["Music Theory", "Performance", "Music History"],
        },
        {
            "id": "stu-011",
            "firstName": "Mia",
            "lastName": "Taylor",
            "email": "mia.taylor@email.com",
            "age": 22,
            "enrollmentDate": "2021-09-01",
            "image": "https://reqres.in/img/faces/12-image.jpg",
            "courses": ["Nursing", "Anatomy", "Public Health"],
        },
        {
            "id": "stu-012",
            "firstName": "Benjamin",
            "lastName": "Moore",
            "email": "benjamin.moore@email.com",
            "age": 19,
            "enrollmentDate": "2023-09-01",
            "image": "https://reqres.in/img/faces/13-image.jpg",
            "courses": ["Film Studies", "Media Production", "Digital Arts"],
        },
    ],
}


def initial_document() -> dict:
    # 호출부에서 수정해도 원본 상수가 변하지 않도록 깊은 복사
    return copy.deepcopy(SEED_DOCUMENT)
