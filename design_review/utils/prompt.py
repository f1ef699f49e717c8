"""터미널 대화형 입력 유틸리티 (프로젝트 선택)."""

from typing import Callable, Optional


InputFn = Callable[[str], str]


def select_project(
    projects: list[str],
    input_fn: InputFn = input,
) -> Optional[str]:
    """
    프로젝트 목록에서 하나를 고르게 합니다.

    - 프로젝트가 없으면 None
    - 하나뿐이면 묻지 않고 그 프로젝트
    - 여러 개면 번호를 입력받고, 범위를 벗어나면 다시 묻습니다.
    - 입력이 닫히면(EOF) 선택 취소로 보고 None
    """
    if not projects:
        return None
    if len(projects) == 1:
        return projects[0]

    print("")
    print("Select a project:")
    print("")
    for index, project in enumerate(projects, 1):
        print(f"  {index}. {project}")
    print("")

    while True:
        try:
            answer = input_fn("Enter number: ").strip()
        except EOFError:
            print("")
            return None
        if answer.isdecimal() and 1 <= int(answer) <= len(projects):
            return projects[int(answer) - 1]
        print(f"Please enter a number between 1 and {len(projects)}")
