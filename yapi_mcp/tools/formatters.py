"""Presentation reshaping for tool results.

Each function turns an adapter result into the localized structure returned
to the calling agent: fields are renamed and grouped (basic info, request,
response...). Values are copied as-is. No I/O happens here.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from yapi_mcp.yapi.models import ApiInterface, ApiListItem, ApiMenu, Category, ListResult, ProjectInfo, SearchResult

RESPONSE_HANDLING_HINT = (
    "如果响应内容中包含了resultCode, errCode等通用响应类型，则只取内容中的 data 当默认成功后的返回数据，忽略掉通用响应类型"
)


def format_api_interface(api: ApiInterface) -> Dict[str, Any]:
    return {
        "基本信息": {
            "接口ID": api.id,
            "接口名称": api.title,
            "接口路径": api.path,
            "请求方式": api.method,
            "接口描述": api.desc,
        },
        "请求参数": {
            "URL参数": api.req_params,
            "查询参数": api.req_query,
            "请求头": api.req_headers,
            "请求体类型": api.req_body_type,
            "表单参数": api.req_body_form,
        },
        "响应信息": {
            "响应类型": api.res_body_type,
            "响应内容": api.res_body,
            "响应内容处理要求": RESPONSE_HANDLING_HINT,
        },
        "其他信息": {
            "接口文档": api.markdown,
        },
    }


def format_category(category: Category) -> Dict[str, Any]:
    return {
        "分类ID": category.id,
        "分类名称": category.name,
        "分类描述": category.desc,
    }


def format_project_info(project: ProjectInfo) -> Dict[str, Any]:
    formatted: Dict[str, Any] = {
        "项目ID": project.id,
        "项目名称": project.name,
        "项目描述": project.desc,
        "基础路径": project.basepath,
    }
    if project.cat is not None:
        formatted["分类列表"] = [format_category(cat) for cat in project.cat]
    return formatted


def format_cat_menu(categories: List[Category]) -> List[Dict[str, Any]]:
    return [format_category(cat) for cat in categories]


def format_cat_interface_list(result: ListResult) -> Dict[str, Any]:
    return {
        "总数": result.total,
        "当前页数量": result.count,
        "接口列表": [
            {
                "接口ID": item.id,
                "接口名称": item.title,
                "接口类型": item.type,
                "项目ID": item.project_id,
            }
            for item in result.items
        ],
    }


def _interface_row(item: ApiListItem) -> Dict[str, Any]:
    # list rows from /api/interface/list may carry only the HTTP method
    return {
        "接口ID": item.id,
        "接口名称": item.title,
        "接口类型": item.type or item.method,
        "接口路径": item.path,
        "项目ID": item.project_id,
    }


def format_interface_list(result: ListResult) -> Dict[str, Any]:
    return {
        "总数": result.total,
        "当前页数量": result.count,
        "接口列表": [_interface_row(item) for item in result.items],
    }


def format_interface_menu(menus: List[ApiMenu]) -> List[Dict[str, Any]]:
    return [
        {
            "分类ID": menu.id,
            "分类名称": menu.name,
            "分类描述": menu.desc,
            "接口列表": [
                {
                    "接口ID": item.id,
                    "接口名称": item.title,
                    "接口路径": item.path,
                    "请求方式": item.method,
                }
                for item in menu.items
            ],
        }
        for menu in menus
    ]


def format_search_result(result: SearchResult) -> Dict[str, Any]:
    return {
        "项目列表": [{"项目ID": project.id, "项目名称": project.name} for project in result.projects],
        "接口列表": [
            {"接口ID": item.id, "接口标题": item.title, "项目id": item.project_id} for item in result.interfaces
        ],
    }


def to_plain(result: Any) -> Any:
    """Dump an adapter result back to the JSON it was parsed from.

    Only keys the upstream sent are emitted, under their wire names.
    """
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(result, list):
        return [to_plain(item) for item in result]
    return to_jsonable_python(result)
